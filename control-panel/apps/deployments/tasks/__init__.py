"""
Deployment tasks module.

Contains Celery tasks for deployment maintenance.
"""

from .maintenance import prune_aged_deployments

__all__ = [
    'prune_aged_deployments',
]
