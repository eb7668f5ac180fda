from __future__ import annotations

import hashlib

from typing_extensions import Protocol

from .tags import Version


class DigestProvider(Protocol):
    """Fixed-length hash applied to raw public keys."""

    digest_size: int

    def digest(self, data: bytes) -> bytes:
        ...


class Sha256(DigestProvider):
    digest_size = 32

    def digest(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()


SHA256 = Sha256()

_VERSION_DIGESTS: dict[Version, DigestProvider] = {
    Version.V1: SHA256,
}


def digest_for_version(version: Version) -> DigestProvider:
    """Return the digest that addresses of `version` commit to."""
    return _VERSION_DIGESTS[version]
