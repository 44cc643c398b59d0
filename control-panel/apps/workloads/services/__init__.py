"""
Workload services module.

Actions invoked by the rollout machinery against apps and their droplets.
"""

from .app_assign_droplet import AppAssignDroplet
from .revision_create import RevisionCreate

__all__ = [
    'AppAssignDroplet',
    'RevisionCreate',
]
