"""Process model."""

from django.db import models

from apps.core.common.models import BaseModel


class Process(BaseModel):
    """
    A runnable process of an app, the unit the scheduler keeps alive.

    ``type`` is the process type named by the droplet (``web``, ``worker``,
    ...). ``role`` tells apart the app's live web process from a web
    process being rolled out by a deployment, which also points at that
    deployment through ``deployment``.
    """

    WEB = 'web'

    class Role(models.TextChoices):
        WEB = 'WEB', 'Web'
        WORKER = 'WORKER', 'Worker'
        DEPLOYING_WEB = 'DEPLOYING_WEB', 'Deploying web'
        TASK = 'TASK', 'Task'

    class State(models.TextChoices):
        STARTED = 'STARTED', 'Started'
        STOPPED = 'STOPPED', 'Stopped'

    class HealthCheckType(models.TextChoices):
        PORT = 'port', 'Port'
        PROCESS = 'process', 'Process'
        HTTP = 'http', 'HTTP'

    app = models.ForeignKey(
        'workloads.App',
        on_delete=models.CASCADE,
        related_name='processes'
    )
    type = models.CharField(max_length=255, default=WEB)
    role = models.CharField(max_length=20, choices=Role.choices, blank=True)
    deployment = models.ForeignKey(
        'deployments.Deployment',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='processes',
        help_text='Deployment rolling out this process, if any'
    )
    state = models.CharField(max_length=20, choices=State.choices, default=State.STOPPED)

    instances = models.PositiveIntegerField(default=1)
    memory = models.PositiveIntegerField(default=1024, help_text='Memory quota in MB')
    disk_quota = models.PositiveIntegerField(default=1024, help_text='Disk quota in MB')
    file_descriptors = models.PositiveIntegerField(default=16384)

    command = models.TextField(null=True, blank=True)
    detected_buildpack = models.CharField(max_length=255, blank=True)

    health_check_type = models.CharField(
        max_length=20,
        choices=HealthCheckType.choices,
        default=HealthCheckType.PORT
    )
    health_check_timeout = models.PositiveIntegerField(null=True, blank=True)
    health_check_invocation_timeout = models.PositiveIntegerField(null=True, blank=True)
    health_check_http_endpoint = models.CharField(max_length=255, null=True, blank=True)

    enable_ssh = models.BooleanField(default=False)
    ports = models.JSONField(null=True, blank=True)
    metadata = models.JSONField(default=dict, blank=True)

    revision = models.ForeignKey(
        'workloads.Revision',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='processes'
    )
    routes = models.ManyToManyField(
        'workloads.Route',
        through='workloads.RouteMapping',
        related_name='processes'
    )

    class Meta:
        db_table = 'processes'
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['app', 'type', 'created_at'], name='processes_app_type_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.app.name}/{self.type} ({self.guid})"

    def save(self, *args, **kwargs):
        if not self.role:
            self.role = self.Role.WEB if self.type == self.WEB else self.Role.WORKER
        super().save(*args, **kwargs)

    @property
    def is_deploying(self) -> bool:
        return self.role == self.Role.DEPLOYING_WEB
