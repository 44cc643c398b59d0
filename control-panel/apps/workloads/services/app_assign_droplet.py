"""Assign a droplet as an app's current droplet."""

import logging

from ..exceptions import InvalidDroplet
from ..models import App, Droplet

logger = logging.getLogger(__name__)


class AppAssignDroplet:
    """Makes a droplet the one an app runs."""

    def assign(self, app: App, droplet: Droplet) -> App:
        """
        Set ``droplet`` as the current droplet of ``app``.

        Raises:
            InvalidDroplet: If the droplet is missing or belongs to another app
        """
        if droplet is None or droplet.app_id != app.pk:
            raise InvalidDroplet('Unable to assign current droplet. Ensure the droplet exists and belongs to this app.')

        app.droplet = droplet
        app.save(update_fields=['droplet', 'updated_at'])
        logger.info(f"Assigned droplet {droplet.guid} to app {app.guid}")
        return app
