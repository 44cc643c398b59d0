"""Clone a web process into the process a deployment rolls out."""

import logging

from apps.workloads.models import Process

logger = logging.getLogger(__name__)

# Runtime characteristics carried over from the process being replaced.
# Instance count is left to the rollout controller, which scales the new
# process up as the old one scales down.
REPLICATED_FIELDS = (
    'command',
    'memory',
    'disk_quota',
    'file_descriptors',
    'ports',
    'detected_buildpack',
    'health_check_type',
    'health_check_timeout',
    'health_check_invocation_timeout',
    'health_check_http_endpoint',
    'enable_ssh',
    'metadata',
)


class ProcessReplicator:
    """Creates deploying processes from existing web processes."""

    @classmethod
    def clone(cls, source: Process, deployment, revision=None) -> Process:
        """
        Create a started deploying process with ``source``'s characteristics.

        Args:
            source: Web process being replaced
            deployment: Deployment the new process belongs to
            revision: Revision to bind the new process to

        Returns:
            The new Process
        """
        attributes = {field: getattr(source, field) for field in REPLICATED_FIELDS}
        process = Process.objects.create(
            app=source.app,
            type=source.type,
            role=Process.Role.DEPLOYING_WEB,
            deployment=deployment,
            state=Process.State.STARTED,
            revision=revision,
            **attributes,
        )
        logger.info(f"Cloned process {source.guid} into deploying process {process.guid}")
        return process
