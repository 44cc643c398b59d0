"""
Deployment models.

A Deployment tracks one rolling replacement of an app's web process.
"""

from django.db import models

from apps.core.common.models import BaseModel


class Deployment(BaseModel):
    """
    A rollout of a droplet onto an app's web process.

    At most one deployment per app is in the DEPLOYING state; creating a
    new one moves the previous DEPLOYING deployment to DEPLOYED.
    """

    class State(models.TextChoices):
        DEPLOYING = 'DEPLOYING', 'Deploying'
        DEPLOYED = 'DEPLOYED', 'Deployed'
        CANCELING = 'CANCELING', 'Canceling'
        CANCELED = 'CANCELED', 'Canceled'

    app = models.ForeignKey(
        'workloads.App',
        on_delete=models.CASCADE,
        related_name='deployments'
    )
    droplet = models.ForeignKey(
        'workloads.Droplet',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='deployments'
    )
    previous_droplet = models.ForeignKey(
        'workloads.Droplet',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    state = models.CharField(
        max_length=20,
        choices=State.choices,
        default=State.DEPLOYING
    )

    # The deploying process is deleted when the rollout finishes, so only its guid is kept
    deploying_web_process_guid = models.CharField(max_length=255, null=True, blank=True)
    original_web_process_instance_count = models.PositiveIntegerField()

    revision_guid = models.CharField(max_length=255, null=True, blank=True)
    revision_version = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        db_table = 'deployments'
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['app', 'state'], name='deployments_app_state_idx'),
            models.Index(fields=['app', 'created_at'], name='deployments_app_created_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.guid} ({self.get_state_display()})"

    @property
    def deploying_web_process(self):
        """The live deploying process, or None once it has been removed."""
        from apps.workloads.models import Process

        if not self.deploying_web_process_guid:
            return None
        return Process.objects.filter(guid=self.deploying_web_process_guid).first()


class HistoricalRelatedProcess(BaseModel):
    """
    Process that took part in a deployment.

    Kept for history after the process itself is deleted; removed together
    with its deployment.
    """

    deployment = models.ForeignKey(
        Deployment,
        on_delete=models.CASCADE,
        related_name='historical_related_processes'
    )
    process_guid = models.CharField(max_length=255)
    process_type = models.CharField(max_length=255)

    class Meta:
        db_table = 'deployment_processes'
        ordering = ['created_at', 'id']
        verbose_name = 'Historical Related Process'
        verbose_name_plural = 'Historical Related Processes'
