"""
Common domain for the rollout control plane.

Provides the shared base model used across all domains.
"""

from .models import BaseModel, generate_guid

__all__ = [
    'BaseModel',
    'generate_guid',
]
