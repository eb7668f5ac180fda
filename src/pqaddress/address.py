from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from typing_extensions import Self

from .checksum import BECH32M, ChecksumCodec
from .digest import digest_for_version
from .exceptions import (
    AddressError,
    InvalidHashLengthError,
    InvalidLengthError,
    InvalidPubkeyLengthError,
)
from .network import Network, hrp_of, network_from_hrp
from .payload import AddressPayload
from .tags import PubKeyType, Version

LOG = logging.getLogger(__name__)

ADDRESS_LENGTH = 64
"""Length of every address string over the currently allocated tags."""


@dataclass(frozen=True)
class AddressParams:
    """Inputs to `encode_address`."""

    network: Network
    version: Version
    pubkey_type: PubKeyType
    pubkey_bytes: bytes


@dataclass(frozen=True)
class DecodedAddress:
    """Contents of an address.

    Only the digest of the public key is recoverable from an address string,
    never the key itself.
    """

    network: Network
    version: Version
    pubkey_type: PubKeyType
    pubkey_hash: bytes

    @classmethod
    def from_pubkey(
        cls,
        network: Network,
        version: Version,
        pubkey_type: PubKeyType,
        pubkey: bytes,
    ) -> Self:
        if len(pubkey) != pubkey_type.pubkey_length:
            raise InvalidPubkeyLengthError(len(pubkey), pubkey_type.pubkey_length)
        pubkey_hash = digest_for_version(version).digest(pubkey)
        return cls(network, version, pubkey_type, pubkey_hash)

    @classmethod
    def from_address(cls, address: str, *, checksum: ChecksumCodec = BECH32M) -> Self:
        hrp, data = checksum.decode(address)
        network = network_from_hrp(hrp)
        payload = AddressPayload.parse(data)
        expected = digest_for_version(payload.version).digest_size
        if len(payload.digest) != expected:
            raise InvalidHashLengthError(len(payload.digest), expected)
        return cls(network, payload.version, payload.pubkey_type, payload.digest)

    def to_payload(self) -> bytes:
        return AddressPayload(self.version, self.pubkey_type, self.pubkey_hash).build()

    def to_address(self, *, checksum: ChecksumCodec = BECH32M) -> str:
        """Encode as an address string.

        A hash of the wrong length yields a string of the wrong length, which
        is reported as `InvalidLengthError`.
        """
        encoded = checksum.encode(hrp_of(self.network), self.to_payload())
        if len(encoded) != ADDRESS_LENGTH:
            raise InvalidLengthError(len(encoded), ADDRESS_LENGTH)
        return encoded

    def matches_pubkey(self, pubkey: bytes) -> bool:
        """Check whether `pubkey` is the key this address commits to."""
        if len(pubkey) != self.pubkey_type.pubkey_length:
            return False
        candidate = digest_for_version(self.version).digest(pubkey)
        return hmac.compare_digest(candidate, self.pubkey_hash)


def encode_address(params: AddressParams, *, checksum: ChecksumCodec = BECH32M) -> str:
    """Encode a public key into an address string.

    Raises a subclass of `EncodeError` if the key length does not match its
    type or the checksum encoding fails.
    """
    address = DecodedAddress.from_pubkey(
        params.network, params.version, params.pubkey_type, params.pubkey_bytes
    ).to_address(checksum=checksum)
    LOG.debug(
        "Encoded %s %s address on %s: %s",
        params.version.name,
        params.pubkey_type.name,
        params.network.name,
        address,
    )
    return address


def decode_address(address: str, *, checksum: ChecksumCodec = BECH32M) -> DecodedAddress:
    """Decode an address string.

    Raises a subclass of `DecodeError` if the string is corrupted or uses
    unknown tags.
    """
    decoded = DecodedAddress.from_address(address, checksum=checksum)
    LOG.debug(
        "Decoded %s %s address on %s",
        decoded.version.name,
        decoded.pubkey_type.name,
        decoded.network.name,
    )
    return decoded


def is_valid_address(address: str, *, checksum: ChecksumCodec = BECH32M) -> bool:
    try:
        decode_address(address, checksum=checksum)
    except AddressError as e:
        LOG.debug("Rejected address %r: %s", address, e)
        return False
    return True
