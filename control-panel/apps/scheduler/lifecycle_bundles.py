"""Lifecycle bundle lookup."""

from typing import Optional
from urllib.parse import urlparse

from .exceptions import InvalidStack
from .settings import SchedulerSettings

LIFECYCLE_DESTINATION = '/tmp/lifecycle'


class LifecycleBundleResolver:
    """
    Maps a lifecycle type and stack to the URI of its lifecycle bundle.

    Bundles are configured under ``<lifecycle type>/<stack>`` keys, or
    under the bare lifecycle type for lifecycles that do not depend on a
    stack (docker).
    """

    def __init__(self, settings: SchedulerSettings):
        self.settings = settings

    def resolve(self, lifecycle_type: str, stack: Optional[str] = None) -> str:
        """
        Return the bundle URI for ``lifecycle_type`` on ``stack``.

        Raises:
            InvalidStack: If no bundle is configured for the pair
        """
        key = f"{lifecycle_type}/{stack}" if stack else lifecycle_type
        bundle = self.settings.lifecycle_bundles.get(key)
        if not bundle:
            raise InvalidStack(f"no compiler defined for requested stack: {key}")
        return self.uri(bundle)

    def uri(self, bundle: str) -> str:
        """Absolute URI for a configured bundle; bare paths are served by the file server."""
        if urlparse(bundle).scheme:
            return bundle
        return f"{self.settings.file_server_url.rstrip('/')}/v1/static/{bundle.lstrip('/')}"

    @staticmethod
    def cache_key(lifecycle_type: str, stack: Optional[str] = None) -> str:
        """Cache key, and image layer name, of a lifecycle bundle."""
        if stack:
            return f"{lifecycle_type}-{stack}-lifecycle"
        return f"{lifecycle_type}-lifecycle"
