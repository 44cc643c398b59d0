"""
Tests for scheduler submission wire shapes and delivery selection.
"""

from django.test import SimpleTestCase, TestCase, override_settings

from apps.scheduler.checksums import Checksum
from apps.scheduler.delivery import (
    ImageDeliveryMode,
    LayeredDelivery,
    LegacyDelivery,
    Payload,
    select_delivery,
)
from apps.scheduler.environment import TaskEnvironmentVariableCollector
from apps.scheduler.graph import (
    ActionGraph,
    DownloadAction,
    EnvironmentVariable,
    ImageLayer,
    LayerType,
    MediaType,
    ResourceLimits,
    RunAction,
    render,
)
from apps.scheduler.settings import SchedulerSettings
from apps.workloads.tests.factories import make_app, make_task
from config.settings import parse_lifecycle_bundles


class WireShapeTests(SimpleTestCase):
    """Test to_dict renderings."""

    def setUp(self):
        self.download = DownloadAction(from_url='http://droplet', to='.', user='vcap',
                                       checksum_algorithm='sha256', checksum_value='abc')
        self.run = RunAction(
            path='/tmp/lifecycle/launcher',
            args=('app', 'rackup', ''),
            user='vcap',
            log_source='APP/TASK/t',
            resource_limits=ResourceLimits(),
            env=(EnvironmentVariable('A', '1'),),
        )

    def test_serial_action(self):
        self.assertEqual(ActionGraph((self.download, self.run)).to_dict(), {
            'serial_action': {'actions': [
                {'download_action': {
                    'from': 'http://droplet',
                    'to': '.',
                    'cache_key': '',
                    'user': 'vcap',
                    'checksum_algorithm': 'sha256',
                    'checksum_value': 'abc',
                }},
                {'run_action': {
                    'path': '/tmp/lifecycle/launcher',
                    'args': ['app', 'rackup', ''],
                    'user': 'vcap',
                    'log_source': 'APP/TASK/t',
                    'resource_limits': {},
                    'env': [{'name': 'A', 'value': '1'}],
                }},
            ]}
        })

    def test_single_action_is_not_wrapped(self):
        self.assertEqual(list(ActionGraph((self.run,)).to_dict()), ['run_action'])

    def test_image_layer_omits_missing_digest(self):
        layer = ImageLayer(
            name='docker-image',
            url='docker:///user/repo#tag',
            destination_path='/',
            layer_type=LayerType.EXCLUSIVE,
            media_type=MediaType.TAR,
        )
        self.assertEqual(layer.to_dict(), {
            'name': 'docker-image',
            'url': 'docker:///user/repo#tag',
            'destination_path': '/',
            'layer_type': 'EXCLUSIVE',
            'media_type': 'TAR',
        })

    def test_render(self):
        self.assertIsNone(render(None))
        self.assertEqual(render([ResourceLimits(nofile=10)]), [{'nofile': 10}])


class DeliverySelectionTests(SimpleTestCase):
    """Test select_delivery."""

    def payload(self, checksum=None, requires_digest=True):
        return Payload(name='droplet', url='http://droplet', destination_path='/home/vcap',
                       checksum=checksum, requires_digest=requires_digest)

    def test_mode_from_setting(self):
        self.assertIs(ImageDeliveryMode.from_setting(None), ImageDeliveryMode.LEGACY)
        self.assertIs(ImageDeliveryMode.from_setting(''), ImageDeliveryMode.LEGACY)
        self.assertIs(ImageDeliveryMode.from_setting('oci-phase-1'), ImageDeliveryMode.OCI_PHASE_1)

    def test_legacy_by_default(self):
        strategy = select_delivery(SchedulerSettings(), self.payload(Checksum('sha256', 'abc')))
        self.assertIsInstance(strategy, LegacyDelivery)

    def test_layered_with_strong_digest(self):
        settings = SchedulerSettings(temporary_oci_buildpack_mode='oci-phase-1')
        strategy = select_delivery(settings, self.payload(Checksum('sha256', 'abc')))
        self.assertIsInstance(strategy, LayeredDelivery)

    def test_legacy_with_weak_digest(self):
        settings = SchedulerSettings(temporary_oci_buildpack_mode='oci-phase-1')
        self.assertIsInstance(select_delivery(settings, self.payload(Checksum('sha1', 'abc'))), LegacyDelivery)
        self.assertIsInstance(select_delivery(settings, self.payload()), LegacyDelivery)

    def test_layered_without_required_digest(self):
        settings = SchedulerSettings(temporary_oci_buildpack_mode='oci-phase-1')
        strategy = select_delivery(settings, self.payload(requires_digest=False))
        self.assertIsInstance(strategy, LayeredDelivery)


class SchedulerSettingsTests(SimpleTestCase):
    """Test SchedulerSettings.from_settings."""

    @override_settings(
        DIEGO_LIFECYCLE_BUNDLES={'docker': 'docker.tgz'},
        DIEGO_FILE_SERVER_URL='http://files:8080',
        DIEGO_TEMPORARY_OCI_BUILDPACK_MODE='oci-phase-1',
        DEFAULT_APP_PORT=9090,
        CREDHUB_API_INTERNAL_URL='',
        CREDENTIAL_REFERENCES_INTERPOLATE_SERVICE_BINDINGS=False,
    )
    def test_from_settings(self):
        settings = SchedulerSettings.from_settings()

        self.assertEqual(dict(settings.lifecycle_bundles), {'docker': 'docker.tgz'})
        self.assertEqual(settings.file_server_url, 'http://files:8080')
        self.assertTrue(settings.oci_phase_1)
        self.assertEqual(settings.default_app_port, 9090)
        self.assertIsNone(settings.credhub_internal_url)
        self.assertFalse(settings.interpolate_service_bindings)

    def test_parse_lifecycle_bundles(self):
        self.assertEqual(
            parse_lifecycle_bundles(['buildpack/cflinuxfs4 = bp.tgz', 'docker=docker.tgz']),
            {'buildpack/cflinuxfs4': 'bp.tgz', 'docker': 'docker.tgz'}
        )
        with self.assertRaises(ValueError):
            parse_lifecycle_bundles(['docker'])


class TaskEnvironmentVariableCollectorTests(TestCase):
    """Test the default task environment."""

    def test_for_task(self):
        app = make_app(name='my-app', environment_variables={'SHARED': 'app', 'APP_ONLY': 'x'})
        task = make_task(app=app, memory_in_mb=512, environment_variables={'SHARED': 'task'})

        environment = TaskEnvironmentVariableCollector.for_task(task)
        names = [variable.name for variable in environment]

        self.assertEqual(names, ['VCAP_APPLICATION', 'MEMORY_LIMIT', 'VCAP_SERVICES', 'APP_ONLY', 'SHARED'])
        self.assertIn(EnvironmentVariable('MEMORY_LIMIT', '512m'), environment)
        self.assertIn(EnvironmentVariable('SHARED', 'task'), environment)
        self.assertIn('"application_name": "my-app"', environment[0].value)
