from __future__ import annotations


class AddressError(ValueError):
    """Base class for all address encoding and decoding failures."""


class EncodeError(AddressError):
    pass


class DecodeError(AddressError):
    pass


# encode-time failures


class InvalidPubkeyLengthError(EncodeError):
    """Raw public key does not have the length registered for its algorithm."""

    def __init__(self, got: int, expected: int) -> None:
        super().__init__(f"Invalid public key length: got {got}, expected {expected}")
        self.got = got
        self.expected = expected


class InvalidLengthError(EncodeError):
    """Encoded address does not have the canonical length."""

    def __init__(self, got: int, expected: int) -> None:
        super().__init__(f"Invalid address length: got {got}, expected {expected}")
        self.got = got
        self.expected = expected


class ChecksumEncodeFailure(EncodeError):
    def __init__(self, original: Exception) -> None:
        super().__init__(f"Bech32m encode failure: {original}")
        self.original = original


# decode-time failures


class ChecksumDecodeFailure(DecodeError):
    def __init__(self, original: Exception) -> None:
        super().__init__(f"Bech32m decode failure: {original}")
        self.original = original


class UnknownPrefixError(DecodeError):
    def __init__(self, prefix: str) -> None:
        super().__init__(f"Unknown HRP: {prefix!r}")
        self.prefix = prefix


class PayloadTooShortError(DecodeError):
    def __init__(self, got: int, need: int) -> None:
        super().__init__(f"Payload too short: got {got}, need at least {need}")
        self.got = got
        self.need = need


class UnknownVersionError(DecodeError):
    def __init__(self, code: int) -> None:
        super().__init__(f"Unknown version code: 0x{code:02x}")
        self.code = code


class UnknownPubKeyTypeError(DecodeError):
    def __init__(self, code: int) -> None:
        super().__init__(f"Unknown public key type code: 0x{code:02x}")
        self.code = code


class InvalidHashLengthError(DecodeError):
    def __init__(self, got: int, expected: int) -> None:
        super().__init__(f"Invalid hash length: got {got}, expected {expected}")
        self.got = got
        self.expected = expected


__all__ = [
    "AddressError",
    "EncodeError",
    "DecodeError",
    "InvalidPubkeyLengthError",
    "InvalidLengthError",
    "ChecksumEncodeFailure",
    "ChecksumDecodeFailure",
    "UnknownPrefixError",
    "PayloadTooShortError",
    "UnknownVersionError",
    "UnknownPubKeyTypeError",
    "InvalidHashLengthError",
]
