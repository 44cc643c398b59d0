"""Exceptions raised by workload actions."""


class WorkloadError(Exception):
    """Base exception for workload actions."""
    pass


class InvalidDroplet(WorkloadError):
    """Raised when a droplet cannot be assigned to an app."""
    pass
