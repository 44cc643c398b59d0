"""
Deployment creation for rolling updates.

Creating a deployment points an app at a new droplet and starts a shadow
copy of its web process that the rollout controller scales up while the
old web process scales down. Everything here runs in one transaction:
either the droplet swap, the revision, the deploying process, its route
mappings, the superseded deployments and the audit event all persist, or
none of them do.
"""

from typing import Optional
import logging

from django.db import transaction

from apps.core.audit import AuditEventRepository, UserAuditInfo
from apps.workloads.exceptions import InvalidDroplet
from apps.workloads.models import App, Droplet
from apps.workloads.services import AppAssignDroplet, RevisionCreate

from ..exceptions import MissingWebProcessError, SetCurrentDropletError
from ..models import Deployment, HistoricalRelatedProcess
from .process_replicator import ProcessReplicator
from .route_carryover import RouteCarryover

logger = logging.getLogger(__name__)

SET_CURRENT_DROPLET_MESSAGE = 'Unable to use droplet. Ensure the droplet exists and belongs to this app.'


class DeploymentCreate:
    """Starts rolling deployments of a droplet onto an app."""

    SetCurrentDropletError = SetCurrentDropletError

    def __init__(self, audit_repository: Optional[AuditEventRepository] = None):
        self.audit_repository = audit_repository or AuditEventRepository()

    @classmethod
    def create(cls, app: App, droplet: Optional[Droplet], user_audit_info: UserAuditInfo,
               audit_repository: Optional[AuditEventRepository] = None) -> Deployment:
        """Shortcut for ``DeploymentCreate(audit_repository).run(...)``."""
        return cls(audit_repository).run(app, droplet, user_audit_info)

    def run(self, app: App, droplet: Optional[Droplet], user_audit_info: UserAuditInfo) -> Deployment:
        """
        Create a DEPLOYING deployment of ``droplet`` for ``app``.

        Args:
            app: App to deploy
            droplet: Droplet to roll out, must belong to ``app``
            user_audit_info: Acting user, recorded on the audit event

        Returns:
            The new Deployment

        Raises:
            SetCurrentDropletError: If the droplet is missing or belongs to another app
            MissingWebProcessError: If the app has no web process to replace
        """
        if droplet is None or droplet.app_id != app.pk:
            raise SetCurrentDropletError(SET_CURRENT_DROPLET_MESSAGE)

        with transaction.atomic():
            # Serialize concurrent creates for the same app
            App.objects.select_for_update().filter(pk=app.pk).first()
            app.refresh_from_db(fields=['droplet'])
            previous_droplet = app.droplet

            try:
                AppAssignDroplet().assign(app, droplet)
            except InvalidDroplet as exc:
                raise SetCurrentDropletError(SET_CURRENT_DROPLET_MESSAGE) from exc

            web_process = app.oldest_web_process
            if web_process is None:
                raise MissingWebProcessError(f"App {app.guid} has no web process to deploy")

            in_flight = list(
                Deployment.objects
                .select_for_update()
                .filter(app=app, state=Deployment.State.DEPLOYING)
                .order_by('created_at', 'id')
            )
            if in_flight:
                instance_count = in_flight[0].original_web_process_instance_count
            else:
                instance_count = web_process.instances

            revision = RevisionCreate.create(app, description=f"Deployed droplet {droplet.guid}")

            self._supersede(in_flight)

            deployment = Deployment.objects.create(
                app=app,
                droplet=droplet,
                previous_droplet=previous_droplet,
                state=Deployment.State.DEPLOYING,
                original_web_process_instance_count=instance_count,
                revision_guid=revision.guid,
                revision_version=revision.version,
            )

            deploying_process = ProcessReplicator.clone(web_process, deployment, revision=revision)
            RouteCarryover.carry_over(web_process, deploying_process)

            deployment.deploying_web_process_guid = deploying_process.guid
            deployment.save(update_fields=['deploying_web_process_guid', 'updated_at'])

            HistoricalRelatedProcess.objects.create(
                deployment=deployment,
                process_guid=deploying_process.guid,
                process_type=deploying_process.type,
            )

            self.audit_repository.record_app_deployment_create(
                app=app,
                droplet_guid=droplet.guid,
                deployment_guid=deployment.guid,
                user_audit_info=user_audit_info,
            )

        logger.info(
            f"Created deployment {deployment.guid} for app {app.guid} "
            f"(droplet {droplet.guid}, revision {revision.version})"
        )
        return deployment

    def _supersede(self, deployments) -> None:
        for previous in deployments:
            previous.state = Deployment.State.DEPLOYED
            previous.save(update_fields=['state', 'updated_at'])
            logger.info(f"Superseded deployment {previous.guid}")
