"""
Core models for the rollout control plane.

Tenancy records (organizations and spaces) that own applications and
routes, and the immutable audit event trail.
"""

from django.db import models
from django.utils import timezone

from .common.models import BaseModel


class Organization(BaseModel):
    """Top-level tenant that owns spaces."""

    name = models.CharField(max_length=255, unique=True)

    class Meta:
        db_table = 'organizations'
        ordering = ['name']

    def __str__(self) -> str:
        return self.name


class Space(BaseModel):
    """A space groups applications and routes inside an organization."""

    name = models.CharField(max_length=255)
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name='spaces'
    )

    class Meta:
        db_table = 'spaces'
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(fields=['organization', 'name'], name='unique_space_name_per_org'),
        ]

    def __str__(self) -> str:
        return f"{self.organization.name}/{self.name}"


class AuditEvent(models.Model):
    """
    Immutable audit record for actions taken against the platform.

    Actor and actee fields are denormalized strings so that the trail
    survives deletion of the user, application or space it mentions.
    """

    guid = models.CharField(max_length=255, unique=True, editable=False)
    type = models.CharField(max_length=255, db_index=True)

    # Who
    actor = models.CharField(max_length=255)
    actor_type = models.CharField(max_length=255)
    actor_name = models.CharField(max_length=255, blank=True)
    actor_username = models.CharField(max_length=255, blank=True)

    # What
    actee = models.CharField(max_length=255, db_index=True)
    actee_type = models.CharField(max_length=255)
    actee_name = models.CharField(max_length=255, blank=True)

    # Where
    space_guid = models.CharField(max_length=255, blank=True, db_index=True)
    organization_guid = models.CharField(max_length=255, blank=True)

    metadata = models.JSONField(default=dict, blank=True)
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'audit_events'
        ordering = ['timestamp', 'id']
        indexes = [
            models.Index(fields=['actee', 'timestamp'], name='audit_events_actee_ts_idx'),
            models.Index(fields=['type', 'timestamp'], name='audit_events_type_ts_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.actor} {self.type} {self.actee_type}:{self.actee} at {self.timestamp}"

    def save(self, *args, **kwargs):
        # Only allow creation, no updates
        if not self._state.adding:
            raise ValueError("Audit events are immutable")
        super().save(*args, **kwargs)
