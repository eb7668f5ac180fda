import hashlib

import pytest

from pqaddress import address, bech32, network
from pqaddress.address import (
    ADDRESS_LENGTH,
    AddressParams,
    DecodedAddress,
    decode_address,
    encode_address,
    is_valid_address,
)
from pqaddress.exceptions import (
    ChecksumDecodeFailure,
    ChecksumEncodeFailure,
    DecodeError,
    EncodeError,
    InvalidHashLengthError,
    InvalidLengthError,
    InvalidPubkeyLengthError,
    PayloadTooShortError,
    UnknownPrefixError,
    UnknownPubKeyTypeError,
    UnknownVersionError,
)
from pqaddress.tags import PubKeyType, Version

ALL_COMBINATIONS = [
    (net, version, pubkey_type)
    for net in network.ALL_NETWORKS
    for version in Version
    for pubkey_type in PubKeyType
]


def make_pubkey(pubkey_type: PubKeyType, fill: int = 0x42) -> bytes:
    return bytes([fill]) * pubkey_type.pubkey_length


def make_params(
    net=network.Mainnet, version=Version.V1, pubkey_type=PubKeyType.MLDSA44
) -> AddressParams:
    return AddressParams(net, version, pubkey_type, make_pubkey(pubkey_type))


@pytest.mark.parametrize(
    "net, version, pubkey_type",
    ALL_COMBINATIONS,
    ids=[f"{n.name}-{v.name}-{p.name}" for n, v, p in ALL_COMBINATIONS],
)
def test_roundtrip(net, version, pubkey_type):
    params = make_params(net, version, pubkey_type)
    addr = encode_address(params)
    assert len(addr) == ADDRESS_LENGTH
    assert addr.startswith(network.hrp_of(net) + "1")

    decoded = decode_address(addr)
    assert decoded.network == net
    assert decoded.version is version
    assert decoded.pubkey_type is pubkey_type
    assert decoded.pubkey_hash == hashlib.sha256(params.pubkey_bytes).digest()
    assert decoded.to_address() == addr


def test_mainnet_mldsa44():
    pubkey = bytes(range(256)) * 5 + bytes(32)
    assert len(pubkey) == 1312
    params = AddressParams(network.Mainnet, Version.V1, PubKeyType.MLDSA44, pubkey)
    addr = encode_address(params)
    assert addr.startswith("yp1")

    decoded = decode_address(addr)
    assert decoded.network is network.Mainnet
    assert decoded.version is Version.V1
    assert decoded.version.name == "V1"
    assert decoded.pubkey_type is PubKeyType.MLDSA44
    assert decoded.pubkey_type.name == "MLDSA44"
    assert decoded.pubkey_hash == hashlib.sha256(pubkey).digest()


def test_deterministic():
    assert encode_address(make_params()) == encode_address(make_params())


def test_distinct_fields_distinct_addresses():
    addresses = {
        encode_address(make_params(net, version, pubkey_type))
        for net, version, pubkey_type in ALL_COMBINATIONS
    }
    assert len(addresses) == len(ALL_COMBINATIONS)


def test_uppercase_accepted():
    addr = encode_address(make_params(network.Testnet))
    assert decode_address(addr.upper()) == decode_address(addr)


@pytest.mark.parametrize("delta", (-1, 1))
@pytest.mark.parametrize("pubkey_type", (PubKeyType.MLDSA44, PubKeyType.SLHDSA_SHA2_128S))
def test_invalid_pubkey_length(pubkey_type, delta):
    expected = pubkey_type.pubkey_length
    params = AddressParams(
        network.Mainnet, Version.V1, pubkey_type, b"\x01" * (expected + delta)
    )
    with pytest.raises(InvalidPubkeyLengthError) as e:
        encode_address(params)
    assert e.value.got == expected + delta
    assert e.value.expected == expected
    assert isinstance(e.value, EncodeError)


def test_encode_failure_bad_hrp():
    params = make_params(network.Network(name="broken", bech32_hrp=""))
    with pytest.raises(ChecksumEncodeFailure) as e:
        encode_address(params)
    assert isinstance(e.value.original, ValueError)
    assert e.value.__cause__ is e.value.original


def test_encode_wrong_length():
    params = make_params(network.Network(name="long", bech32_hrp="ypq"))
    with pytest.raises(InvalidLengthError) as e:
        encode_address(params)
    assert e.value.got == ADDRESS_LENGTH + 1
    assert e.value.expected == ADDRESS_LENGTH


@pytest.mark.parametrize("net", network.ALL_NETWORKS, ids=lambda n: n.name)
def test_tamper_detection(net):
    addr = encode_address(make_params(net))
    separator = addr.rfind("1")
    for i in range(len(addr)):
        if i < separator:
            replacement = "x" if addr[i] != "x" else "z"
        elif i == separator:
            replacement = "q"
        else:
            charset_pos = bech32.CHARSET.index(addr[i])
            replacement = bech32.CHARSET[(charset_pos + 1) % len(bech32.CHARSET)]
        tampered = addr[:i] + replacement + addr[i + 1 :]
        with pytest.raises(ChecksumDecodeFailure):
            decode_address(tampered)
        assert not is_valid_address(tampered)


def test_testnet_corrupted_last_character():
    addr = encode_address(make_params(network.Testnet, pubkey_type=PubKeyType.MLDSA87))
    last = "q" if addr[-1] != "q" else "p"
    with pytest.raises(ChecksumDecodeFailure) as e:
        decode_address(addr[:-1] + last)
    assert isinstance(e.value, DecodeError)


@pytest.mark.parametrize(
    "string",
    (
        "",
        "yp1",
        "not an address",
        "yp1qqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqq",
    ),
)
def test_malformed(string):
    with pytest.raises(ChecksumDecodeFailure):
        decode_address(string)


def test_bech32_checksum_rejected():
    payload = b"\x00\x40" + hashlib.sha256(b"key").digest()
    data = bech32.convertbits(payload, 8, 5)
    string = bech32.bech32_encode("yp", data, bech32.Encoding.BECH32)
    with pytest.raises(ChecksumDecodeFailure):
        decode_address(string)


def test_unknown_prefix():
    string = bech32.encode("bc", b"\x00\x40" + hashlib.sha256(b"key").digest())
    with pytest.raises(UnknownPrefixError) as e:
        decode_address(string)
    assert e.value.prefix == "bc"


@pytest.mark.parametrize("payload", (b"", b"\x00"))
def test_payload_too_short(payload):
    with pytest.raises(PayloadTooShortError) as e:
        decode_address(bech32.encode("rh", payload))
    assert e.value.got == len(payload)
    assert e.value.need == 2


def test_unknown_version():
    string = bech32.encode("yp", b"\x01\x40" + bytes(32))
    with pytest.raises(UnknownVersionError) as e:
        decode_address(string)
    assert e.value.code == 0x01


def test_unknown_pubkey_type():
    string = bech32.encode("yp", b"\x00\x99" + bytes(32))
    with pytest.raises(UnknownPubKeyTypeError) as e:
        decode_address(string)
    assert e.value.code == 0x99


@pytest.mark.parametrize("length", (0, 20, 31, 33))
def test_invalid_hash_length(length):
    string = bech32.encode("yp", b"\x00\x40" + bytes(length))
    with pytest.raises(InvalidHashLengthError) as e:
        decode_address(string)
    assert e.value.got == length
    assert e.value.expected == 32


def test_matches_pubkey():
    params = make_params(pubkey_type=PubKeyType.SLHDSA_SHAKE_128F)
    decoded = decode_address(encode_address(params))
    assert decoded.matches_pubkey(params.pubkey_bytes)
    assert not decoded.matches_pubkey(make_pubkey(PubKeyType.SLHDSA_SHAKE_128F, 0x43))
    assert not decoded.matches_pubkey(params.pubkey_bytes + b"\x00")


def test_from_pubkey_equals_decoded():
    params = make_params(network.Testnet, pubkey_type=PubKeyType.MLDSA65)
    built = DecodedAddress.from_pubkey(
        params.network, params.version, params.pubkey_type, params.pubkey_bytes
    )
    assert built == decode_address(encode_address(params))
    assert built.to_payload()[:2] == b"\x00\x41"


def test_custom_checksum_codec():
    class Recording:
        def __init__(self):
            self.calls = []

        def encode(self, hrp, data):
            self.calls.append(("encode", hrp, data))
            return address.BECH32M.encode(hrp, data)

        def decode(self, text):
            self.calls.append(("decode", text))
            return address.BECH32M.decode(text)

    codec = Recording()
    params = make_params()
    addr = encode_address(params, checksum=codec)
    decode_address(addr, checksum=codec)
    assert [call[0] for call in codec.calls] == ["encode", "decode"]
    assert codec.calls[0][1] == "yp"
    assert len(codec.calls[0][2]) == 34


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode_address("garbage")
    assert is_valid_address(encode_address(make_params()))


@pytest.mark.parametrize("length", (0, 20, 33))
def test_to_address_wrong_hash_length(length):
    built = DecodedAddress(network.Mainnet, Version.V1, PubKeyType.MLDSA44, bytes(length))
    with pytest.raises(InvalidLengthError) as e:
        built.to_address()
    assert isinstance(e.value, EncodeError)
    assert not isinstance(e.value, DecodeError)
    assert e.value.expected == ADDRESS_LENGTH
