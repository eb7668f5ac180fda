from __future__ import annotations

from dataclasses import asdict, dataclass

import construct as c
from typing_extensions import Self

from .exceptions import PayloadTooShortError
from .tags import PubKeyType, Version

HEADER_LENGTH = 2
"""Size of the tag header: one version byte and one public key type byte."""


@dataclass(frozen=True)
class AddressPayload:
    """Byte payload carried inside an address string.

    Layout is a version byte, a public key type byte and the digest of the
    public key. The digest length is not checked here; it depends on the
    digest fixed by the version.
    """

    version: Version
    pubkey_type: PubKeyType
    digest: bytes

    SUBCON = c.Struct(
        "version" / c.Int8ul,
        "pubkey_type" / c.Int8ul,
        "digest" / c.GreedyBytes,
    )

    def build(self) -> bytes:
        return self.SUBCON.build(asdict(self))

    @classmethod
    def parse(cls, data: bytes) -> Self:
        if len(data) < HEADER_LENGTH:
            raise PayloadTooShortError(len(data), HEADER_LENGTH)
        result = cls.SUBCON.parse(data)
        return cls(
            version=Version.from_code(result.version),
            pubkey_type=PubKeyType.from_code(result.pubkey_type),
            digest=result.digest,
        )


def pack_payload(version: Version, pubkey_type: PubKeyType, digest: bytes) -> bytes:
    return AddressPayload(version, pubkey_type, digest).build()


def unpack_payload(data: bytes) -> AddressPayload:
    return AddressPayload.parse(data)
