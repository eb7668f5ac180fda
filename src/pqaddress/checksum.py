from __future__ import annotations

from typing_extensions import Protocol

from . import bech32
from .exceptions import ChecksumDecodeFailure, ChecksumEncodeFailure


class ChecksumCodec(Protocol):
    """Checksummed text encoding of a byte payload under a short prefix."""

    def encode(self, hrp: str, data: bytes) -> str:
        ...

    def decode(self, text: str) -> tuple[str, bytes]:
        ...


class Bech32m(ChecksumCodec):
    """Bech32m (BIP-350) codec.

    Failures of the underlying transform are re-raised as
    `ChecksumEncodeFailure` / `ChecksumDecodeFailure`, with the original
    exception chained.
    """

    def encode(self, hrp: str, data: bytes) -> str:
        try:
            return bech32.encode(hrp, data, bech32.Encoding.BECH32M)
        except ValueError as e:
            raise ChecksumEncodeFailure(e) from e

    def decode(self, text: str) -> tuple[str, bytes]:
        try:
            return bech32.decode(text, bech32.Encoding.BECH32M)
        except ValueError as e:
            raise ChecksumDecodeFailure(e) from e


BECH32M = Bech32m()
