"""
Tests for DeploymentPruner.
"""

from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from apps.deployments.models import Deployment, HistoricalRelatedProcess
from apps.deployments.services import DeploymentPruner
from apps.workloads.tests.factories import make_app

CYCLED_STATES = (
    Deployment.State.DEPLOYED,
    Deployment.State.CANCELING,
    Deployment.State.CANCELED,
)


def make_deployments(app, total, states=CYCLED_STATES):
    """Create ``total`` deployments, oldest first, cycling through ``states``."""
    now = timezone.now()
    return [
        Deployment.objects.create(
            app=app,
            state=states[i % len(states)],
            original_web_process_instance_count=1,
            created_at=now - timedelta(seconds=total - i),
        )
        for i in range(total)
    ]


class DeploymentPrunerTests(TestCase):
    """Test pruning an app's deployment history."""

    def setUp(self):
        self.app = make_app()

    def test_keeps_newest_deployments(self):
        """Only the newest deployments up to the limit survive."""
        deployments = make_deployments(self.app, 50)

        deleted = DeploymentPruner.prune(self.app, 15)

        self.assertEqual(deleted, 35)
        remaining = list(Deployment.objects.filter(app=self.app).values_list('pk', flat=True))
        self.assertEqual(remaining, [d.pk for d in deployments[35:]])

    def test_nothing_to_prune_under_limit(self):
        """An app under the limit is untouched."""
        make_deployments(self.app, 5)

        self.assertEqual(DeploymentPruner.prune(self.app, 15), 0)
        self.assertEqual(Deployment.objects.filter(app=self.app).count(), 5)

    def test_never_deletes_deploying(self):
        """In-flight deployments survive even when old."""
        deployments = make_deployments(self.app, 10)
        oldest = deployments[0]
        oldest.state = Deployment.State.DEPLOYING
        oldest.save()

        deleted = DeploymentPruner.prune(self.app, 3)

        self.assertEqual(deleted, 7)
        self.assertTrue(Deployment.objects.filter(pk=oldest.pk).exists())
        self.assertEqual(Deployment.objects.filter(app=self.app).count(), 3)

    def test_may_keep_more_than_limit_when_in_flight(self):
        """Protected deployments can leave the app over the limit."""
        make_deployments(self.app, 4, states=(Deployment.State.DEPLOYING,))

        self.assertEqual(DeploymentPruner.prune(self.app, 2), 0)
        self.assertEqual(Deployment.objects.filter(app=self.app).count(), 4)

    def test_other_apps_untouched(self):
        """Pruning one app never deletes another app's deployments."""
        other_app = make_app()
        make_deployments(other_app, 20)
        make_deployments(self.app, 20)

        DeploymentPruner.prune(self.app, 5)

        self.assertEqual(Deployment.objects.filter(app=self.app).count(), 5)
        self.assertEqual(Deployment.objects.filter(app=other_app).count(), 20)

    def test_deletes_historical_related_processes(self):
        """History rows go with their deployment."""
        deployments = make_deployments(self.app, 3)
        for deployment in deployments:
            HistoricalRelatedProcess.objects.create(
                deployment=deployment,
                process_guid=f"process-{deployment.pk}",
                process_type='web',
            )

        DeploymentPruner.prune(self.app, 1)

        self.assertEqual(
            list(HistoricalRelatedProcess.objects.values_list('deployment_id', flat=True)),
            [deployments[-1].pk]
        )

    def test_zero_limit_clears_finished_history(self):
        """A zero limit removes every unprotected deployment."""
        make_deployments(self.app, 6)

        self.assertEqual(DeploymentPruner.prune(self.app, 0), 6)

    def test_negative_limit_rejected(self):
        """A negative limit is an error."""
        with self.assertRaises(ValueError):
            DeploymentPruner.prune(self.app, -1)
