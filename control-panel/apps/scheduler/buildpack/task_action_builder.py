"""Scheduler submission for tasks run from a buildpack droplet."""

from typing import Any, Dict, List, Optional
import logging

from ..checksums import ChecksumSelector
from ..delivery import Lifecycle, Payload, select_delivery
from ..environment import TaskEnvironmentVariableCollector, platform_options
from ..graph import (
    ActionGraph,
    CachedDependency,
    DownloadAction,
    EnvironmentVariable,
    ImageLayer,
    ResourceLimits,
    RunAction,
)
from ..lifecycle_bundles import LifecycleBundleResolver
from ..settings import SchedulerSettings

logger = logging.getLogger(__name__)

LIFECYCLE_TYPE = 'buildpack'
LAUNCHER_PATH = '/tmp/lifecycle/launcher'
TASK_USER = 'vcap'
DROPLET_LAYER_NAME = 'droplet'
DROPLET_DESTINATION = '/home/vcap'


class TaskActionBuilder:
    """
    Builds the action graph, cached dependencies, image layers and
    environment for running a task from its droplet.

    ``lifecycle_data`` carries the ``droplet_uri`` the droplet is served
    from and the ``stack`` it was staged on.
    """

    def __init__(self, settings: SchedulerSettings, task, lifecycle_data: Dict[str, Any],
                 environment_collector=None):
        self.settings = settings
        self.task = task
        self.lifecycle_data = lifecycle_data
        self.environment_collector = environment_collector or TaskEnvironmentVariableCollector
        self.bundles = LifecycleBundleResolver(settings)

        self.checksum = ChecksumSelector.select(task.droplet)
        self.payload = Payload(
            name=DROPLET_LAYER_NAME,
            url=lifecycle_data['droplet_uri'],
            destination_path=DROPLET_DESTINATION,
            checksum=self.checksum,
        )
        self.delivery = select_delivery(settings, self.payload)

    def action(self) -> ActionGraph:
        graph = self.delivery.action(self._download_droplet_action(), self._run_task_action())
        logger.debug(f"Built {len(graph)}-step action graph for task {self.task.guid}")
        return graph

    def image_layers(self) -> Optional[List[ImageLayer]]:
        return self.delivery.image_layers(self._lifecycles, self.payload)

    def cached_dependencies(self) -> Optional[List[CachedDependency]]:
        return self.delivery.cached_dependencies(self._lifecycles)

    def environment_variables(self) -> List[EnvironmentVariable]:
        return self.task_environment_variables() + platform_options(self.settings)

    def task_environment_variables(self) -> List[EnvironmentVariable]:
        return list(self.environment_collector.for_task(self.task))

    def stack(self) -> str:
        return f"preloaded:{self.lifecycle_data['stack']}"

    def _lifecycles(self) -> List[Lifecycle]:
        stack = self.lifecycle_data['stack']
        return [Lifecycle(
            cache_key=LifecycleBundleResolver.cache_key(LIFECYCLE_TYPE, stack),
            url=self.bundles.resolve(LIFECYCLE_TYPE, stack),
        )]

    def _download_droplet_action(self) -> DownloadAction:
        return DownloadAction(
            from_url=self.lifecycle_data['droplet_uri'],
            to='.',
            cache_key='',
            user=TASK_USER,
            checksum_algorithm=self.checksum.algorithm if self.checksum else None,
            checksum_value=self.checksum.value if self.checksum else None,
        )

    def _run_task_action(self) -> RunAction:
        return RunAction(
            path=LAUNCHER_PATH,
            args=('app', self.task.command, ''),
            log_source=f"APP/TASK/{self.task.name}",
            user=TASK_USER,
            resource_limits=ResourceLimits(),
            env=tuple(self.environment_variables()),
        )
