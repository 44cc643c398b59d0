"""Retention sweep for deployment history."""

import logging

from django.db import transaction

from ..models import Deployment

logger = logging.getLogger(__name__)


class DeploymentPruner:
    """Deletes an app's oldest deployments beyond a retention limit."""

    # In-flight rollouts are kept regardless of age
    PROTECTED_STATES = (Deployment.State.DEPLOYING,)

    @classmethod
    def prune(cls, app, retention_limit: int) -> int:
        """
        Delete ``app``'s oldest deployments until at most ``retention_limit`` remain.

        Deployments in a protected state are never deleted, so more than
        ``retention_limit`` may survive when many are in flight. Historical
        related processes go with their deployment.

        Args:
            app: App whose history is swept; other apps' rows are untouched
            retention_limit: Number of deployments to keep

        Returns:
            Number of deployments deleted
        """
        if retention_limit < 0:
            raise ValueError(f"retention_limit must be >= 0, got {retention_limit}")

        with transaction.atomic():
            deployments = Deployment.objects.select_for_update().filter(app=app)
            excess = deployments.count() - retention_limit
            if excess <= 0:
                return 0

            doomed = list(
                deployments
                .exclude(state__in=cls.PROTECTED_STATES)
                .order_by('created_at', 'id')
                .values_list('pk', flat=True)[:excess]
            )
            Deployment.objects.filter(pk__in=doomed).delete()

        logger.info(f"Pruned {len(doomed)} deployment(s) for app {app.guid}")
        return len(doomed)
