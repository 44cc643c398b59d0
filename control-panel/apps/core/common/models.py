"""
Common base models for the rollout control plane.

This module contains the abstract base model shared by every persisted
record in the system.
"""

import uuid

from django.db import models
from django.utils import timezone


def generate_guid() -> str:
    """Return a new random guid string."""
    return str(uuid.uuid4())


class BaseModel(models.Model):
    """
    Abstract base model with common fields for all models.

    All models inheriting from BaseModel automatically get:
    - guid: Stable external identity
    - created_at, updated_at: Timestamp tracking
    """

    guid = models.CharField(
        max_length=255,
        unique=True,
        default=generate_guid,
        editable=False,
    )
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['-created_at']

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.guid})"
