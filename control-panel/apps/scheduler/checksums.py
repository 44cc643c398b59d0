"""Droplet integrity digest selection."""

from dataclasses import dataclass
from typing import Optional

from .graph import DigestAlgorithm

SHA256 = 'sha256'
SHA1 = 'sha1'


@dataclass(frozen=True)
class Checksum:
    algorithm: str
    value: str

    @property
    def is_strong(self) -> bool:
        return self.algorithm == SHA256

    @property
    def digest_algorithm(self) -> Optional[DigestAlgorithm]:
        """Layer digest algorithm, only defined for strong digests."""
        return DigestAlgorithm.SHA256 if self.is_strong else None


class ChecksumSelector:
    """Picks the strongest digest recorded on a droplet."""

    @staticmethod
    def select(droplet) -> Optional[Checksum]:
        """
        Prefer the sha256 checksum; fall back to the legacy sha1 droplet hash.

        Droplets staged before sha256 checksums were computed only carry a
        sha1 hash. Returns None when the droplet has neither.
        """
        if droplet is None:
            return None
        if droplet.sha256_checksum:
            return Checksum(SHA256, droplet.sha256_checksum)
        if droplet.droplet_hash:
            return Checksum(SHA1, droplet.droplet_hash)
        return None
