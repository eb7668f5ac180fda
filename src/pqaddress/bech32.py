"""Bech32 and Bech32m checksummed base32 encoding.

Implements the string encoding of BIP-173, with the modified checksum constant
of BIP-350. All failures are reported as `ValueError`.
"""

from __future__ import annotations

import typing as t
from enum import Enum

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
MAX_BECH32_LENGTH = 90

_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


class Encoding(Enum):
    """Checksum variant, identified by the constant the polymod must match."""

    BECH32 = 1
    BECH32M = 0x2BC830A3


def bech32_polymod(values: t.Iterable[int]) -> int:
    """Internal function that computes the Bech32 checksum."""
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ value
        for i, gen in enumerate(_GENERATOR):
            chk ^= gen if ((top >> i) & 1) else 0
    return chk


def bech32_hrp_expand(hrp: str) -> list[int]:
    """Expand the HRP into values for checksum computation."""
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def bech32_verify_checksum(hrp: str, data: list[int]) -> Encoding | None:
    """Verify a checksum given HRP and converted data characters."""
    const = bech32_polymod(bech32_hrp_expand(hrp) + data)
    for encoding in Encoding:
        if const == encoding.value:
            return encoding
    return None


def bech32_create_checksum(hrp: str, data: list[int], spec: Encoding) -> list[int]:
    """Compute the checksum values given HRP and data."""
    values = bech32_hrp_expand(hrp) + data
    polymod = bech32_polymod(values + [0, 0, 0, 0, 0, 0]) ^ spec.value
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]


def bech32_encode(hrp: str, data: list[int], spec: Encoding) -> str:
    """Compute a Bech32 string given HRP and data values."""
    if not hrp:
        raise ValueError("Empty HRP")
    if any(ord(x) < 33 or ord(x) > 126 for x in hrp):
        raise ValueError("HRP character out of range")
    if hrp.lower() != hrp and hrp.upper() != hrp:
        raise ValueError("Mixed case HRP")
    if any(not 0 <= d < 32 for d in data):
        raise ValueError("Data value out of range")
    hrp = hrp.lower()
    combined = data + bech32_create_checksum(hrp, data, spec)
    result = hrp + "1" + "".join(CHARSET[d] for d in combined)
    if len(result) > MAX_BECH32_LENGTH:
        raise ValueError(f"Bech32 string longer than {MAX_BECH32_LENGTH} characters")
    return result


def bech32_decode(bech: str) -> tuple[str, list[int], Encoding]:
    """Validate a Bech32/Bech32m string, and determine HRP and data."""
    if any(ord(x) < 33 or ord(x) > 126 for x in bech):
        raise ValueError("Character out of range")
    if bech.lower() != bech and bech.upper() != bech:
        raise ValueError("Mixed case string")
    bech = bech.lower()
    pos = bech.rfind("1")
    if pos < 1:
        raise ValueError("Missing separator or empty HRP")
    if pos + 7 > len(bech):
        raise ValueError("Checksum too short")
    if len(bech) > MAX_BECH32_LENGTH:
        raise ValueError(f"Bech32 string longer than {MAX_BECH32_LENGTH} characters")
    if not all(x in CHARSET for x in bech[pos + 1 :]):
        raise ValueError("Invalid data character")
    hrp = bech[:pos]
    data = [CHARSET.find(x) for x in bech[pos + 1 :]]
    spec = bech32_verify_checksum(hrp, data)
    if spec is None:
        raise ValueError("Invalid checksum")
    return hrp, data[:-6], spec


def convertbits(
    data: t.Iterable[int], frombits: int, tobits: int, pad: bool = True
) -> list[int]:
    """General power-of-2 base conversion."""
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or (value >> frombits):
            raise ValueError("Value out of range")
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits:
        raise ValueError("Excess padding")
    elif (acc << (tobits - bits)) & maxv:
        raise ValueError("Non-zero padding")
    return ret


def encode(hrp: str, data: bytes, spec: Encoding = Encoding.BECH32M) -> str:
    """Encode a byte string under `hrp`."""
    return bech32_encode(hrp, convertbits(data, 8, 5), spec)


def decode(bech: str, spec: Encoding = Encoding.BECH32M) -> tuple[str, bytes]:
    """Decode a string produced by `encode`.

    Raises `ValueError` if the checksum is invalid or uses a different variant
    than `spec`.
    """
    hrp, data, encoding = bech32_decode(bech)
    if encoding != spec:
        raise ValueError(f"Expected {spec.name} checksum, found {encoding.name}")
    return hrp, bytes(convertbits(data, 5, 8, False))
