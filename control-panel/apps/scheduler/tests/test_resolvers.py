"""
Tests for lifecycle bundle, checksum, port and docker URI resolution.
"""

from types import SimpleNamespace

from django.test import SimpleTestCase

from apps.scheduler.checksums import Checksum, ChecksumSelector
from apps.scheduler.docker_uri import DockerURIConverter
from apps.scheduler.exceptions import (
    InvalidDockerURI,
    InvalidExecutionMetadata,
    InvalidStack,
    NoTcpPortsError,
)
from apps.scheduler.graph import DigestAlgorithm
from apps.scheduler.lifecycle_bundles import LifecycleBundleResolver
from apps.scheduler.ports import PortResolver, parse_execution_metadata
from apps.scheduler.settings import SchedulerSettings


class LifecycleBundleResolverTests(SimpleTestCase):
    """Test LifecycleBundleResolver."""

    def setUp(self):
        self.resolver = LifecycleBundleResolver(SchedulerSettings(
            lifecycle_bundles={
                'buildpack/cflinuxfs4': 'buildpack_app_lifecycle/buildpack_app_lifecycle.tgz',
                'buildpack/custom': 'https://bundles.example.com/custom.tgz',
                'docker': 'docker_app_lifecycle/docker_app_lifecycle.tgz',
            },
            file_server_url='http://file-server.service.cf.internal:8080/',
        ))

    def test_bare_path_served_by_file_server(self):
        self.assertEqual(
            self.resolver.resolve('buildpack', 'cflinuxfs4'),
            'http://file-server.service.cf.internal:8080/v1/static/buildpack_app_lifecycle/buildpack_app_lifecycle.tgz'
        )

    def test_absolute_uri_passes_through(self):
        self.assertEqual(self.resolver.resolve('buildpack', 'custom'), 'https://bundles.example.com/custom.tgz')

    def test_stackless_lifecycle(self):
        """Docker bundles are keyed by lifecycle type alone."""
        self.assertEqual(
            self.resolver.resolve('docker'),
            'http://file-server.service.cf.internal:8080/v1/static/docker_app_lifecycle/docker_app_lifecycle.tgz'
        )

    def test_unknown_stack(self):
        with self.assertRaises(InvalidStack) as context:
            self.resolver.resolve('buildpack', 'windows')

        self.assertEqual(str(context.exception), 'no compiler defined for requested stack: buildpack/windows')

    def test_cache_keys(self):
        self.assertEqual(LifecycleBundleResolver.cache_key('buildpack', 'cflinuxfs4'), 'buildpack-cflinuxfs4-lifecycle')
        self.assertEqual(LifecycleBundleResolver.cache_key('docker'), 'docker-lifecycle')

    def test_settings_bundles_are_read_only(self):
        settings = SchedulerSettings(lifecycle_bundles={'docker': 'a.tgz'})
        with self.assertRaises(TypeError):
            settings.lifecycle_bundles['docker'] = 'b.tgz'


class ChecksumSelectorTests(SimpleTestCase):
    """Test ChecksumSelector."""

    def droplet(self, sha256_checksum=None, droplet_hash=None):
        return SimpleNamespace(sha256_checksum=sha256_checksum, droplet_hash=droplet_hash)

    def test_prefers_sha256(self):
        checksum = ChecksumSelector.select(self.droplet('b' * 64, 'a' * 40))

        self.assertEqual(checksum, Checksum('sha256', 'b' * 64))
        self.assertTrue(checksum.is_strong)
        self.assertEqual(checksum.digest_algorithm, DigestAlgorithm.SHA256)

    def test_falls_back_to_sha1(self):
        checksum = ChecksumSelector.select(self.droplet(droplet_hash='a' * 40))

        self.assertEqual(checksum, Checksum('sha1', 'a' * 40))
        self.assertFalse(checksum.is_strong)
        self.assertIsNone(checksum.digest_algorithm)

    def test_no_digest(self):
        self.assertIsNone(ChecksumSelector.select(self.droplet()))
        self.assertIsNone(ChecksumSelector.select(None))


class PortResolverTests(SimpleTestCase):
    """Test PortResolver."""

    def setUp(self):
        self.resolver = PortResolver(default_port=8080)

    def test_explicit_ports(self):
        metadata = '{"ports":[{"port":3,"protocol":"tcp"}]}'
        self.assertEqual(self.resolver.resolve([1111], metadata), [1111])

    def test_tcp_ports_in_order(self):
        metadata = {
            'ports': [
                {'port': 4, 'protocol': 'tcp'},
                {'port': 1, 'protocol': 'udp'},
                {'port': '3', 'protocol': 'tcp'},
            ]
        }
        self.assertEqual(self.resolver.resolve(None, metadata), [4, 3])

    def test_protocol_must_be_lowercase_tcp(self):
        metadata = {'ports': [{'port': 3, 'protocol': 'TCP'}, {'port': 4, 'protocol': 'tcp'}]}
        self.assertEqual(self.resolver.resolve(None, metadata), [4])

    def test_default_port(self):
        self.assertEqual(self.resolver.resolve(None, None), [8080])
        self.assertEqual(self.resolver.resolve([], '{}'), [8080])
        self.assertEqual(self.resolver.resolve([], '{"ports":[]}'), [8080])

    def test_configured_default_port(self):
        self.assertEqual(PortResolver(default_port=9000).resolve(None, '{}'), [9000])

    def test_udp_only(self):
        with self.assertRaises(NoTcpPortsError):
            self.resolver.resolve(None, '{"ports":[{"port":1,"protocol":"udp"}]}')

    def test_malformed_metadata(self):
        with self.assertRaises(InvalidExecutionMetadata):
            parse_execution_metadata('{not json')
        with self.assertRaises(InvalidExecutionMetadata):
            parse_execution_metadata('[1, 2]')

    def test_malformed_ports(self):
        """Badly shaped port declarations raise InvalidExecutionMetadata."""
        cases = [
            '{"ports":[{"protocol":"tcp"}]}',
            '{"ports":"8080"}',
            '{"ports":[8080]}',
            '{"ports":[{"port":"abc","protocol":"tcp"}]}',
            '{"ports":[{"port":null,"protocol":"tcp"}]}',
        ]
        for metadata in cases:
            with self.subTest(metadata=metadata):
                with self.assertRaises(InvalidExecutionMetadata):
                    self.resolver.resolve([], metadata)


class DockerURIConverterTests(SimpleTestCase):
    """Test DockerURIConverter."""

    def setUp(self):
        self.converter = DockerURIConverter()

    def test_conversions(self):
        cases = {
            'user/repo:tag': 'docker:///user/repo#tag',
            'user/repo': 'docker:///user/repo#latest',
            'ubuntu': 'docker:///library/ubuntu#latest',
            'ubuntu:22.04': 'docker:///library/ubuntu#22.04',
            'registry.example.com/repo:tag': 'docker://registry.example.com/repo#tag',
            'localhost:5000/team/repo': 'docker://localhost:5000/team/repo#latest',
            'localhost/repo:1': 'docker://localhost/repo#1',
            'user/repo@sha256:abcdef': 'docker:///user/repo#sha256:abcdef',
        }
        for reference, expected in cases.items():
            with self.subTest(reference=reference):
                self.assertEqual(self.converter.convert(reference), expected)

    def test_rejects_scheme(self):
        with self.assertRaises(InvalidDockerURI):
            self.converter.convert('docker://user/repo')

    def test_rejects_empty(self):
        with self.assertRaises(InvalidDockerURI):
            self.converter.convert('')
