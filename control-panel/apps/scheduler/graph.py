"""
Scheduler submission value types.

Plain, immutable descriptions of what the external scheduler must do to
run a workload: the action graph (download and run steps), cached
dependencies, image layers and environment variables. Each type renders
its wire shape with ``to_dict()``; fields left as ``None`` are omitted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple, Union


def _compact(values: Dict[str, Any]) -> Dict[str, Any]:
    """Drop None values and render enums as their values."""
    rendered = {}
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        rendered[key] = value
    return rendered


class LayerType(str, Enum):
    SHARED = 'SHARED'
    EXCLUSIVE = 'EXCLUSIVE'


class MediaType(str, Enum):
    TGZ = 'TGZ'
    TAR = 'TAR'
    ZIP = 'ZIP'


class DigestAlgorithm(str, Enum):
    SHA256 = 'SHA256'
    SHA512 = 'SHA512'


@dataclass(frozen=True)
class EnvironmentVariable:
    name: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'value': self.value}


@dataclass(frozen=True)
class ResourceLimits:
    nofile: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({'nofile': self.nofile})


@dataclass(frozen=True)
class DownloadAction:
    """Fetch an artifact into the container."""

    from_url: str
    to: str
    cache_key: str = ''
    user: str = ''
    checksum_algorithm: Optional[str] = None
    checksum_value: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'download_action': _compact({
            'from': self.from_url,
            'to': self.to,
            'cache_key': self.cache_key,
            'user': self.user,
            'checksum_algorithm': self.checksum_algorithm,
            'checksum_value': self.checksum_value,
        })}


@dataclass(frozen=True)
class RunAction:
    """Run the workload's entry command."""

    path: str
    args: Tuple[str, ...] = ()
    user: str = ''
    log_source: str = ''
    resource_limits: ResourceLimits = field(default_factory=ResourceLimits)
    env: Tuple[EnvironmentVariable, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {'run_action': {
            'path': self.path,
            'args': list(self.args),
            'user': self.user,
            'log_source': self.log_source,
            'resource_limits': self.resource_limits.to_dict(),
            'env': [variable.to_dict() for variable in self.env],
        }}


Action = Union[DownloadAction, RunAction]


@dataclass(frozen=True)
class ActionGraph:
    """
    Ordered steps the scheduler runs for a workload.

    A single step is submitted as-is; several steps run one after the
    other inside a serial action.
    """

    actions: Tuple[Action, ...]

    def __len__(self) -> int:
        return len(self.actions)

    @property
    def download_action(self) -> Optional[DownloadAction]:
        return next((a for a in self.actions if isinstance(a, DownloadAction)), None)

    @property
    def run_action(self) -> Optional[RunAction]:
        return next((a for a in self.actions if isinstance(a, RunAction)), None)

    def to_dict(self) -> Dict[str, Any]:
        if len(self.actions) == 1:
            return self.actions[0].to_dict()
        return {'serial_action': {'actions': [action.to_dict() for action in self.actions]}}


@dataclass(frozen=True)
class CachedDependency:
    """Artifact the scheduler downloads once and caches across containers."""

    from_url: str
    to: str
    cache_key: str

    def to_dict(self) -> Dict[str, Any]:
        return {'from': self.from_url, 'to': self.to, 'cache_key': self.cache_key}


@dataclass(frozen=True)
class ImageLayer:
    """Layer the scheduler assembles into the container filesystem."""

    name: str
    url: str
    destination_path: str
    layer_type: LayerType
    media_type: MediaType
    digest_algorithm: Optional[DigestAlgorithm] = None
    digest_value: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            'name': self.name,
            'url': self.url,
            'destination_path': self.destination_path,
            'layer_type': self.layer_type,
            'media_type': self.media_type,
            'digest_algorithm': self.digest_algorithm,
            'digest_value': self.digest_value,
        })


def render(items: Optional[Sequence[Any]]) -> Optional[list]:
    """Render an optional list of value types for the wire."""
    if items is None:
        return None
    return [item.to_dict() for item in items]
