"""Application, droplet and revision models."""

from django.db import models

from apps.core.common.models import BaseModel


class App(BaseModel):
    """An application: the unit that owns processes, droplets and deployments."""

    class LifecycleType(models.TextChoices):
        BUILDPACK = 'buildpack', 'Buildpack'
        DOCKER = 'docker', 'Docker'

    name = models.CharField(max_length=255)
    space = models.ForeignKey(
        'core.Space',
        on_delete=models.CASCADE,
        related_name='apps'
    )
    droplet = models.ForeignKey(
        'workloads.Droplet',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        help_text='Current droplet the app runs'
    )
    lifecycle_type = models.CharField(
        max_length=20,
        choices=LifecycleType.choices,
        default=LifecycleType.BUILDPACK
    )
    stack = models.CharField(max_length=255, default='cflinuxfs4')
    environment_variables = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = 'apps'
        ordering = ['created_at', 'id']
        constraints = [
            models.UniqueConstraint(fields=['space', 'name'], name='unique_app_name_per_space'),
        ]

    def __str__(self) -> str:
        return self.name

    @property
    def oldest_web_process(self):
        """
        The app's current web process.

        When several processes share the web type the oldest one wins, so
        repeated deployments keep cloning the original rollout's settings.
        """
        from .process import Process

        return (
            self.processes
            .filter(type=Process.WEB, role=Process.Role.WEB)
            .order_by('created_at', 'id')
            .first()
        )


class Droplet(BaseModel):
    """Staged, runnable artifact produced for an app."""

    class State(models.TextChoices):
        STAGING = 'STAGING', 'Staging'
        STAGED = 'STAGED', 'Staged'
        FAILED = 'FAILED', 'Failed'
        EXPIRED = 'EXPIRED', 'Expired'

    app = models.ForeignKey(
        App,
        on_delete=models.CASCADE,
        related_name='droplets'
    )
    state = models.CharField(max_length=20, choices=State.choices, default=State.STAGED)

    # Integrity digests; droplets staged before sha256 existed only carry a sha1
    sha256_checksum = models.CharField(max_length=64, null=True, blank=True)
    droplet_hash = models.CharField(max_length=40, null=True, blank=True)

    process_types = models.JSONField(default=dict, blank=True)
    docker_image = models.CharField(max_length=255, blank=True)
    execution_metadata = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'droplets'
        ordering = ['created_at', 'id']


class Revision(BaseModel):
    """Immutable snapshot of what an app was asked to run."""

    app = models.ForeignKey(
        App,
        on_delete=models.CASCADE,
        related_name='revisions'
    )
    version = models.PositiveIntegerField()
    droplet = models.ForeignKey(
        Droplet,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='revisions'
    )
    description = models.CharField(max_length=255, blank=True)

    class Meta:
        db_table = 'revisions'
        ordering = ['created_at', 'id']
        constraints = [
            models.UniqueConstraint(fields=['app', 'version'], name='unique_revision_version_per_app'),
        ]

    def __str__(self) -> str:
        return f"{self.app.name} v{self.version}"
