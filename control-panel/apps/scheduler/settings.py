"""
Scheduler submission settings.

Builders take a ``SchedulerSettings`` snapshot instead of reading Django
settings, so building a submission depends only on its arguments.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

OCI_PHASE_1 = 'oci-phase-1'


@dataclass(frozen=True)
class SchedulerSettings:
    """Configuration consumed while building scheduler submissions."""

    lifecycle_bundles: Mapping[str, str] = field(default_factory=dict)
    file_server_url: str = 'http://file-server.service.cf.internal:8080'
    temporary_oci_buildpack_mode: Optional[str] = None
    default_app_port: int = 8080
    credhub_internal_url: Optional[str] = None
    interpolate_service_bindings: bool = True

    def __post_init__(self):
        object.__setattr__(self, 'lifecycle_bundles', MappingProxyType(dict(self.lifecycle_bundles)))

    @classmethod
    def from_settings(cls) -> 'SchedulerSettings':
        """Snapshot the current Django settings."""
        from django.conf import settings

        return cls(
            lifecycle_bundles=settings.DIEGO_LIFECYCLE_BUNDLES,
            file_server_url=settings.DIEGO_FILE_SERVER_URL,
            temporary_oci_buildpack_mode=settings.DIEGO_TEMPORARY_OCI_BUILDPACK_MODE,
            default_app_port=settings.DEFAULT_APP_PORT,
            credhub_internal_url=settings.CREDHUB_API_INTERNAL_URL or None,
            interpolate_service_bindings=settings.CREDENTIAL_REFERENCES_INTERPOLATE_SERVICE_BINDINGS,
        )

    @property
    def oci_phase_1(self) -> bool:
        return self.temporary_oci_buildpack_mode == OCI_PHASE_1
