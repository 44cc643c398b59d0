"""Exceptions raised while building scheduler submissions."""


class SchedulerError(Exception):
    """Base exception for scheduler submission building."""
    pass


class InvalidStack(SchedulerError):
    """Raised when no lifecycle bundle is configured for a lifecycle/stack pair."""
    pass


class NoTcpPortsError(SchedulerError):
    """Raised when image metadata declares ports but none of them are TCP."""
    pass


class InvalidDockerURI(SchedulerError):
    """Raised when a docker image reference cannot be converted."""
    pass


class InvalidExecutionMetadata(SchedulerError):
    """Raised when image execution metadata is not a JSON object."""
    pass
