"""Scheduler submission for long-running processes run from a docker image."""

from typing import Any, Dict, List, Optional
import json
import logging

from ..delivery import Lifecycle, Payload, select_delivery
from ..docker_uri import DockerURIConverter
from ..environment import platform_options
from ..graph import (
    ActionGraph,
    CachedDependency,
    DownloadAction,
    EnvironmentVariable,
    ImageLayer,
    MediaType,
    ResourceLimits,
    RunAction,
)
from ..lifecycle_bundles import LifecycleBundleResolver
from ..ports import PortResolver, parse_execution_metadata
from ..settings import SchedulerSettings

logger = logging.getLogger(__name__)

LIFECYCLE_TYPE = 'docker'
LAUNCHER_PATH = '/tmp/lifecycle/launcher'
DEFAULT_USER = 'root'
IMAGE_LAYER_NAME = 'docker-image'


class DesiredLrpBuilder:
    """
    Builds the scheduler submission for a docker process.

    ``opts`` keys:
        docker_image: Image reference, e.g. ``user/repo:tag``
        execution_metadata: Image metadata JSON (ports, user, ...)
        start_command: Command to run
        ports: Explicit ports, overriding those in the image metadata
        environment_variables: Extra EnvironmentVariable entries (optional)
        file_descriptors: Open file limit (optional)
        process_type: Process type for the log source, default ``web``
    """

    def __init__(self, settings: SchedulerSettings, opts: Dict[str, Any]):
        self.settings = settings
        self.opts = opts
        self.bundles = LifecycleBundleResolver(settings)
        self.port_resolver = PortResolver(settings.default_app_port)

        # Image references are resolved by the registry, not verified by digest
        self.payload = Payload(
            name=IMAGE_LAYER_NAME,
            url=self.root_fs(),
            destination_path='/',
            media_type=MediaType.TAR,
            requires_digest=False,
        )
        self.delivery = select_delivery(settings, self.payload)

    @classmethod
    def for_process(cls, settings: SchedulerSettings, process) -> 'DesiredLrpBuilder':
        """Builder for a docker app's process, from the app's current droplet."""
        droplet = process.app.droplet
        return cls(settings, {
            'docker_image': droplet.docker_image,
            'execution_metadata': droplet.execution_metadata,
            'start_command': process.command or '',
            'ports': process.ports,
            'file_descriptors': process.file_descriptors,
            'process_type': process.type,
            'environment_variables': [
                EnvironmentVariable(name, str(value))
                for name, value in sorted(process.app.environment_variables.items())
            ],
        })

    def action(self) -> ActionGraph:
        download = DownloadAction(
            from_url=self.root_fs(),
            to='/',
            cache_key=self.root_fs(),
            user=self.action_user(),
        )
        graph = self.delivery.action(download, self._run_action())
        logger.debug(f"Built {len(graph)}-step action graph for image {self.opts['docker_image']}")
        return graph

    def image_layers(self) -> Optional[List[ImageLayer]]:
        return self.delivery.image_layers(self._lifecycles, self.payload)

    def cached_dependencies(self) -> Optional[List[CachedDependency]]:
        return self.delivery.cached_dependencies(self._lifecycles)

    def environment_variables(self) -> List[EnvironmentVariable]:
        return (
            self.port_environment_variables()
            + self.platform_options()
            + list(self.opts.get('environment_variables') or [])
        )

    def root_fs(self) -> str:
        return DockerURIConverter().convert(self.opts['docker_image'])

    def setup(self) -> None:
        return None

    def global_environment_variables(self) -> List[EnvironmentVariable]:
        return []

    def ports(self) -> List[int]:
        return self.port_resolver.resolve(self.opts.get('ports'), self.opts.get('execution_metadata'))

    def port_environment_variables(self) -> List[EnvironmentVariable]:
        # Only the primary port is exported; the rest are scheduler port mappings
        return [EnvironmentVariable('PORT', str(self.ports()[0]))]

    def platform_options(self) -> List[EnvironmentVariable]:
        return platform_options(self.settings)

    def action_user(self) -> str:
        metadata = parse_execution_metadata(self.opts.get('execution_metadata'))
        return metadata.get('user') or DEFAULT_USER

    def start_command(self) -> str:
        return self.opts['start_command']

    def _lifecycles(self) -> List[Lifecycle]:
        return [Lifecycle(
            cache_key=LifecycleBundleResolver.cache_key(LIFECYCLE_TYPE),
            url=self.bundles.resolve(LIFECYCLE_TYPE),
        )]

    def _run_action(self) -> RunAction:
        process_type = self.opts.get('process_type') or 'web'
        execution_metadata = self.opts.get('execution_metadata') or '{}'
        if not isinstance(execution_metadata, str):
            execution_metadata = json.dumps(execution_metadata)
        return RunAction(
            path=LAUNCHER_PATH,
            args=('app', self.start_command(), execution_metadata),
            log_source=f"APP/PROC/{process_type.upper()}",
            user=self.action_user(),
            resource_limits=ResourceLimits(nofile=self.opts.get('file_descriptors')),
            env=tuple(self.environment_variables()),
        )
