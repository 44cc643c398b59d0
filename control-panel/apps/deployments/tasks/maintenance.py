"""
Celery tasks for deployment history maintenance.

Periodic retention sweep over every app's deployment history.
"""

from typing import Any, Dict, Optional
from celery import shared_task
from celery.utils.log import get_task_logger

logger = get_task_logger(__name__)

JOB_NAME = 'aged_deployments_cleanup'


@shared_task(bind=True, max_retries=0)
def prune_aged_deployments(
    self,
    retention_limit: Optional[int] = None
) -> Dict[str, Any]:
    """
    Prune deployment history of every app over the retention limit.

    Each app is swept in its own transaction; a failure for one app is
    logged and the sweep moves on to the next.

    Args:
        retention_limit: Deployments to keep per app, defaults to
            settings.MAX_RETAINED_DEPLOYMENTS_PER_APP

    Returns:
        Dictionary with sweep summary
    """
    from django.conf import settings
    from django.db.models import Count
    from apps.workloads.models import App
    from ..services import DeploymentPruner

    if retention_limit is None:
        retention_limit = settings.MAX_RETAINED_DEPLOYMENTS_PER_APP

    logger.info(f"Running {JOB_NAME} with limit {retention_limit} per app")

    apps = (
        App.objects
        .annotate(deployment_count=Count('deployments'))
        .filter(deployment_count__gt=retention_limit)
        .order_by('id')
    )

    deleted_count = 0
    apps_pruned = 0
    failures = []
    for app in apps:
        try:
            deleted = DeploymentPruner.prune(app, retention_limit)
        except Exception as exc:
            logger.error(f"Failed to prune deployments for app {app.guid}: {exc}")
            failures.append(app.guid)
            continue

        deleted_count += deleted
        if deleted:
            apps_pruned += 1

    logger.info(f"Pruned {deleted_count} deployment(s) across {apps_pruned} app(s)")

    return {
        'success': not failures,
        'apps_pruned': apps_pruned,
        'deleted_count': deleted_count,
        'failed_apps': failures,
    }
