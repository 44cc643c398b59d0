"""
Deployment services module.

Contains the services that start rolling deployments and sweep their history.
"""

from .deployment_create import DeploymentCreate
from .process_replicator import ProcessReplicator
from .pruner import DeploymentPruner
from .route_carryover import RouteCarryover

__all__ = [
    'DeploymentCreate',
    'DeploymentPruner',
    'ProcessReplicator',
    'RouteCarryover',
]
