"""
Payload delivery strategies.

A workload's payload (droplet or image) and its lifecycle bundles reach
the container in one of two ways:

- legacy: the run step is preceded by a download of the payload, and the
  lifecycle bundles are cached dependencies;
- layered (``oci-phase-1``): the scheduler assembles the container from
  image layers, one shared layer per lifecycle bundle plus an exclusive
  layer for the payload, and only the run step remains.

Layered delivery needs a sha256 digest for a droplet payload. A droplet
that only has a legacy sha1 hash is delivered the legacy way even when
layered delivery is configured.

The strategy is chosen once, when a builder is constructed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence
import logging

from .checksums import Checksum
from .graph import (
    ActionGraph,
    CachedDependency,
    DownloadAction,
    ImageLayer,
    LayerType,
    MediaType,
    RunAction,
)
from .lifecycle_bundles import LIFECYCLE_DESTINATION
from .settings import SchedulerSettings

logger = logging.getLogger(__name__)


class ImageDeliveryMode(str, Enum):
    LEGACY = 'legacy'
    OCI_PHASE_1 = 'oci-phase-1'

    @classmethod
    def from_setting(cls, value: Optional[str]) -> 'ImageDeliveryMode':
        """Unset and empty settings both mean legacy delivery."""
        if value == cls.OCI_PHASE_1.value:
            return cls.OCI_PHASE_1
        return cls.LEGACY


@dataclass(frozen=True)
class Lifecycle:
    """A lifecycle bundle to place in the container."""

    cache_key: str
    url: str
    destination: str = LIFECYCLE_DESTINATION


@dataclass(frozen=True)
class Payload:
    """The workload artifact itself."""

    name: str
    url: str
    destination_path: str
    media_type: MediaType = MediaType.TGZ
    checksum: Optional[Checksum] = None
    requires_digest: bool = True

    @property
    def layerable(self) -> bool:
        if not self.requires_digest:
            return True
        return self.checksum is not None and self.checksum.is_strong


LifecycleSource = Callable[[], Sequence[Lifecycle]]


class DeliveryStrategy(ABC):
    """How the payload and lifecycle bundles reach the container."""

    mode: ImageDeliveryMode

    @abstractmethod
    def action(self, download: DownloadAction, run: RunAction) -> ActionGraph:
        """The action graph for the workload."""

    @abstractmethod
    def cached_dependencies(self, lifecycles: LifecycleSource) -> Optional[List[CachedDependency]]:
        """Cached dependencies, or None when lifecycles are not cached."""

    @abstractmethod
    def image_layers(self, lifecycles: LifecycleSource, payload: Payload) -> Optional[List[ImageLayer]]:
        """Image layers, or None when the container is not assembled from layers."""


class LegacyDelivery(DeliveryStrategy):
    """Download the payload, then run."""

    mode = ImageDeliveryMode.LEGACY

    def action(self, download: DownloadAction, run: RunAction) -> ActionGraph:
        return ActionGraph((download, run))

    def cached_dependencies(self, lifecycles: LifecycleSource) -> Optional[List[CachedDependency]]:
        return [
            CachedDependency(from_url=lifecycle.url, to=lifecycle.destination, cache_key=lifecycle.cache_key)
            for lifecycle in lifecycles()
        ]

    def image_layers(self, lifecycles: LifecycleSource, payload: Payload) -> Optional[List[ImageLayer]]:
        return None


class LayeredDelivery(DeliveryStrategy):
    """Assemble the container from image layers, then run."""

    mode = ImageDeliveryMode.OCI_PHASE_1

    def action(self, download: DownloadAction, run: RunAction) -> ActionGraph:
        return ActionGraph((run,))

    def cached_dependencies(self, lifecycles: LifecycleSource) -> Optional[List[CachedDependency]]:
        return None

    def image_layers(self, lifecycles: LifecycleSource, payload: Payload) -> Optional[List[ImageLayer]]:
        layers = [
            ImageLayer(
                name=lifecycle.cache_key,
                url=lifecycle.url,
                destination_path=lifecycle.destination,
                layer_type=LayerType.SHARED,
                media_type=MediaType.TGZ,
            )
            for lifecycle in lifecycles()
        ]

        checksum = payload.checksum
        layers.append(ImageLayer(
            name=payload.name,
            url=payload.url,
            destination_path=payload.destination_path,
            layer_type=LayerType.EXCLUSIVE,
            media_type=payload.media_type,
            digest_algorithm=checksum.digest_algorithm if checksum else None,
            digest_value=checksum.value if checksum and checksum.is_strong else None,
        ))
        return layers


def select_delivery(settings: SchedulerSettings, payload: Payload) -> DeliveryStrategy:
    """Pick the delivery strategy for ``payload`` under ``settings``."""
    mode = ImageDeliveryMode.from_setting(settings.temporary_oci_buildpack_mode)
    if mode is ImageDeliveryMode.OCI_PHASE_1:
        if payload.layerable:
            return LayeredDelivery()
        logger.debug(f"Payload {payload.name} has no sha256 digest, delivering it by download")
    return LegacyDelivery()
