"""Exceptions raised by deployment services."""


class DeploymentError(Exception):
    """Base exception for deployment services."""
    pass


class SetCurrentDropletError(DeploymentError):
    """Raised when the target droplet cannot become the app's current droplet."""
    pass


class MissingWebProcessError(DeploymentError):
    """Raised when an app has no web process to roll out."""
    pass
