"""Docker image reference conversion."""

from typing import Tuple

from .exceptions import InvalidDockerURI

DEFAULT_TAG = 'latest'
OFFICIAL_REPOSITORY_PREFIX = 'library/'


class DockerURIConverter:
    """
    Converts docker image references into scheduler rootfs URIs.

    ``user/repo:tag`` becomes ``docker:///user/repo#tag``; a registry host
    becomes the URI host (``docker://registry.example.com/repo#tag``).
    """

    def convert(self, image_reference: str) -> str:
        host, path, fragment = self.parse(image_reference)
        return f"docker://{host}/{path}#{fragment}"

    def parse(self, image_reference: str) -> Tuple[str, str, str]:
        """
        Split an image reference into (registry host, repository path, tag or digest).

        Raises:
            InvalidDockerURI: If the reference is empty or carries a scheme
        """
        if not image_reference or not image_reference.strip():
            raise InvalidDockerURI('Docker URI must not be empty')
        if '://' in image_reference:
            raise InvalidDockerURI(f"Docker URI [{image_reference}] should not contain scheme")

        host, remainder = '', image_reference
        first, _, rest = image_reference.partition('/')
        if rest and ('.' in first or ':' in first or first == 'localhost'):
            host, remainder = first, rest

        if '@' in remainder:
            path, fragment = remainder.split('@', 1)
        else:
            repository, _, last = remainder.rpartition('/')
            name, _, tag = last.partition(':')
            path = f"{repository}/{name}" if repository else name
            fragment = tag or DEFAULT_TAG

        if not path:
            raise InvalidDockerURI(f"Docker URI [{image_reference}] has no repository")
        if not host and '/' not in path:
            path = OFFICIAL_REPOSITORY_PREFIX + path

        return host, path, fragment
