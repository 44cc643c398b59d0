"""
Audit event recording.

The orchestration services never write audit rows directly; they hand a
structured record to an ``AuditEventRepository``. The default repository
persists ``AuditEvent`` rows in the caller's transaction, so an event is
only visible if the operation it describes committed.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging
import uuid

from django.utils import timezone

from .models import AuditEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserAuditInfo:
    """Identity of the user performing an audited action."""

    user_guid: str
    user_email: str = ''
    user_name: str = ''


class AuditEventRepository:
    """Records audit events for application lifecycle actions."""

    APP_DEPLOYMENT_CREATE = 'audit.app.deployment.create'

    def record_app_deployment_create(
        self,
        app,
        droplet_guid: Optional[str],
        deployment_guid: str,
        user_audit_info: UserAuditInfo,
    ) -> AuditEvent:
        """
        Record that a deployment was created for an application.

        Args:
            app: App the deployment belongs to
            droplet_guid: Droplet being rolled out
            deployment_guid: Guid of the new deployment
            user_audit_info: Acting user

        Returns:
            The persisted AuditEvent
        """
        metadata = {
            'droplet_guid': droplet_guid,
            'deployment_guid': deployment_guid,
        }
        return self._record(
            event_type=self.APP_DEPLOYMENT_CREATE,
            app=app,
            user_audit_info=user_audit_info,
            metadata=metadata,
        )

    def _record(self, event_type: str, app, user_audit_info: UserAuditInfo,
                metadata: Dict[str, Any]) -> AuditEvent:
        space = app.space
        event = AuditEvent.objects.create(
            guid=str(uuid.uuid4()),
            type=event_type,
            actor=user_audit_info.user_guid,
            actor_type='user',
            actor_name=user_audit_info.user_email,
            actor_username=user_audit_info.user_name,
            actee=app.guid,
            actee_type='app',
            actee_name=app.name,
            space_guid=space.guid,
            organization_guid=space.organization.guid,
            metadata=metadata,
            timestamp=timezone.now(),
        )
        logger.debug(f"Recorded {event_type} for app {app.guid}")
        return event
