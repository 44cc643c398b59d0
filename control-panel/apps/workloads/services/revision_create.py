"""Revision creation."""

import logging

from django.db.models import Max

from ..models import App, Revision

logger = logging.getLogger(__name__)


class RevisionCreate:
    """Creates the next revision of an app from its current droplet."""

    @classmethod
    def create(cls, app: App, description: str = '') -> Revision:
        """
        Create a revision with the next monotonic version for ``app``.

        Callers are expected to hold a lock on the app row so that
        concurrent creates cannot pick the same version.
        """
        latest = app.revisions.aggregate(latest=Max('version'))['latest'] or 0
        revision = Revision.objects.create(
            app=app,
            version=latest + 1,
            droplet=app.droplet,
            description=description,
        )
        logger.info(f"Created revision {revision.version} for app {app.guid}")
        return revision
