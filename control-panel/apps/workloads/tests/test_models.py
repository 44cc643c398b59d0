"""
Tests for workload models.
"""

from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from apps.workloads.models import Process
from .factories import make_app, make_process, make_route, make_route_mapping


class ProcessModelTests(TestCase):
    """Test Process model."""

    def test_web_type_gets_web_role(self):
        """A process of the web type is the app's web process."""
        process = make_process(type='web')
        self.assertEqual(process.role, Process.Role.WEB)
        self.assertFalse(process.is_deploying)

    def test_other_types_get_worker_role(self):
        """Any other type is a worker."""
        process = make_process(type='worker')
        self.assertEqual(process.role, Process.Role.WORKER)

    def test_explicit_role_is_kept(self):
        """A deploying web process keeps its role."""
        process = make_process(type='web', role=Process.Role.DEPLOYING_WEB)
        self.assertEqual(process.role, Process.Role.DEPLOYING_WEB)
        self.assertTrue(process.is_deploying)

    def test_routes_through_route_mappings(self):
        """Routes mapped to a process are reachable from it."""
        process = make_process()
        route = make_route(process.app.space)
        make_route_mapping(process, route=route, weight=3)

        self.assertEqual(list(process.routes.all()), [route])


class AppModelTests(TestCase):
    """Test App model."""

    def test_oldest_web_process_wins(self):
        """With several web processes the oldest is the current one."""
        app = make_app()
        now = timezone.now()
        newer = make_process(app=app, command='new command!', created_at=now - timedelta(hours=23))
        older = make_process(app=app, command='old command!', created_at=now - timedelta(hours=24))
        make_process(app=app, command='newest command!', created_at=now - timedelta(hours=1))

        self.assertEqual(app.oldest_web_process, older)
        self.assertNotEqual(app.oldest_web_process, newer)

    def test_oldest_web_process_ignores_deploying_and_workers(self):
        """Deploying web processes and workers are never the current web process."""
        app = make_app()
        now = timezone.now()
        make_process(app=app, role=Process.Role.DEPLOYING_WEB, created_at=now - timedelta(days=2))
        make_process(app=app, type='worker', created_at=now - timedelta(days=2))
        web = make_process(app=app, created_at=now)

        self.assertEqual(app.oldest_web_process, web)

    def test_oldest_web_process_none_without_web(self):
        """An app without a web process has no current web process."""
        app = make_app()
        make_process(app=app, type='worker')
        self.assertIsNone(app.oldest_web_process)
