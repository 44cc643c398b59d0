"""Task model."""

from django.db import models

from apps.core.common.models import BaseModel


class Task(BaseModel):
    """A one-off command run to completion against an app's droplet."""

    class State(models.TextChoices):
        PENDING = 'PENDING', 'Pending'
        RUNNING = 'RUNNING', 'Running'
        SUCCEEDED = 'SUCCEEDED', 'Succeeded'
        FAILED = 'FAILED', 'Failed'
        CANCELING = 'CANCELING', 'Canceling'

    app = models.ForeignKey(
        'workloads.App',
        on_delete=models.CASCADE,
        related_name='tasks'
    )
    droplet = models.ForeignKey(
        'workloads.Droplet',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tasks'
    )
    name = models.CharField(max_length=255)
    command = models.TextField()
    state = models.CharField(max_length=20, choices=State.choices, default=State.PENDING)
    memory_in_mb = models.PositiveIntegerField(default=256)
    disk_in_mb = models.PositiveIntegerField(default=1024)
    environment_variables = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = 'tasks'
        ordering = ['created_at', 'id']

    def __str__(self) -> str:
        return f"{self.app.name}/{self.name}"
