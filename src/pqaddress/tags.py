from __future__ import annotations

from enum import IntEnum

from typing_extensions import Self

from .exceptions import UnknownPubKeyTypeError, UnknownVersionError

VERSION_RANGE = range(0x00, 0x40)
"""Codes reserved for address format versions."""

PUBKEY_TYPE_RANGE = range(0x40, 0x100)
"""Codes reserved for public key algorithms."""


class Version(IntEnum):
    """Address format version.

    Each version fixes the digest algorithm applied to the public key. New
    versions take unused codes from `VERSION_RANGE`; existing codes are never
    reinterpreted.
    """

    V1 = 0x00

    @classmethod
    def from_code(cls, code: int) -> Self:
        try:
            return cls(code)
        except ValueError as e:
            raise UnknownVersionError(code) from e

    def to_code(self) -> int:
        return self.value


class PubKeyType(IntEnum):
    """Signature algorithm of the public key an address commits to."""

    MLDSA44 = 0x40
    MLDSA65 = 0x41
    MLDSA87 = 0x42
    SLHDSA_SHA2_128S = 0x43
    SLHDSA_SHA2_128F = 0x44
    SLHDSA_SHA2_192S = 0x45
    SLHDSA_SHA2_192F = 0x46
    SLHDSA_SHA2_256S = 0x47
    SLHDSA_SHA2_256F = 0x48
    SLHDSA_SHAKE_128S = 0x49
    SLHDSA_SHAKE_128F = 0x4A
    SLHDSA_SHAKE_192S = 0x4B
    SLHDSA_SHAKE_192F = 0x4C
    SLHDSA_SHAKE_256S = 0x4D
    SLHDSA_SHAKE_256F = 0x4E

    @classmethod
    def from_code(cls, code: int) -> Self:
        try:
            return cls(code)
        except ValueError as e:
            raise UnknownPubKeyTypeError(code) from e

    def to_code(self) -> int:
        return self.value

    @property
    def pubkey_length(self) -> int:
        """Length in bytes of a raw public key of this type."""
        return _PUBKEY_LENGTHS[self]


# FIPS 204 (ML-DSA) and FIPS 205 (SLH-DSA) public key sizes
_PUBKEY_LENGTHS = {
    PubKeyType.MLDSA44: 1312,
    PubKeyType.MLDSA65: 1952,
    PubKeyType.MLDSA87: 2592,
    PubKeyType.SLHDSA_SHA2_128S: 32,
    PubKeyType.SLHDSA_SHA2_128F: 32,
    PubKeyType.SLHDSA_SHA2_192S: 48,
    PubKeyType.SLHDSA_SHA2_192F: 48,
    PubKeyType.SLHDSA_SHA2_256S: 64,
    PubKeyType.SLHDSA_SHA2_256F: 64,
    PubKeyType.SLHDSA_SHAKE_128S: 32,
    PubKeyType.SLHDSA_SHAKE_128F: 32,
    PubKeyType.SLHDSA_SHAKE_192S: 48,
    PubKeyType.SLHDSA_SHAKE_192F: 48,
    PubKeyType.SLHDSA_SHAKE_256S: 64,
    PubKeyType.SLHDSA_SHAKE_256F: 64,
}
