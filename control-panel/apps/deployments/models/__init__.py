"""
Deployment models module.

Exports all deployment-related models:
- Deployment: A rollout of a droplet onto an app's web process
- HistoricalRelatedProcess: Processes that took part in a deployment
"""

from .deployment import Deployment, HistoricalRelatedProcess

__all__ = [
    'Deployment',
    'HistoricalRelatedProcess',
]
