"""Unit tests for the field-level codecs."""

import pytest

from etherscan_accounts.codecs import (
    ADDRESS,
    HASH,
    QUANTITY,
    TEXT,
    U64_BITS,
    decode_address,
    decode_block_number,
    decode_bytes,
    decode_hash,
    decode_hex,
    decode_json_string,
    decode_numeric,
    decode_numeric_opt,
    encode_hex,
    encode_json_string,
    encode_numeric,
)
from etherscan_accounts.errors import (
    DecodeError,
    MalformedEmbeddedJson,
    MalformedHex,
    MalformedNumeric,
)


# Numeric strings


@pytest.mark.parametrize("value", [0, 1, 21000, 2**64 - 1, 2**256 - 1])
def test_numeric_round_trip(value: int) -> None:
    assert decode_numeric(encode_numeric(value), "value") == value


@pytest.mark.parametrize("raw", ["not_a_number", "", "-1", "1.5", " 1", "1 ", "0x10", "1e3", "١٢"])
def test_numeric_rejects_partial_or_signed_input(raw: str) -> None:
    with pytest.raises(MalformedNumeric) as excinfo:
        decode_numeric(raw, "value")
    assert excinfo.value.field == "value"
    assert excinfo.value.raw == raw


def test_numeric_rejects_values_outside_width() -> None:
    with pytest.raises(MalformedNumeric):
        decode_numeric(str(2**64), "confirmations", U64_BITS)
    with pytest.raises(MalformedNumeric):
        decode_numeric(str(2**256), "value")


def test_numeric_rejects_non_string() -> None:
    with pytest.raises(MalformedNumeric):
        decode_numeric(12, "value")


def test_optional_numeric_treats_empty_as_absent() -> None:
    assert decode_numeric_opt("", "gasPrice") is None
    assert decode_numeric_opt("7", "gasPrice") == 7
    assert encode_numeric(None) == ""
    with pytest.raises(MalformedNumeric):
        decode_numeric_opt("x", "gasPrice")


def test_block_number_accepts_decimal_and_hex() -> None:
    assert decode_block_number("14923678", "blockNumber") == 14923678
    assert decode_block_number("0xe3b8de", "blockNumber") == 0xE3B8DE
    for raw in ("0x", "0xzz", "latest", ""):
        with pytest.raises(MalformedNumeric):
            decode_block_number(raw, "blockNumber")


# Hex strings


@pytest.mark.parametrize("value", [b"", b"\x00", b"\xa9\x05\x9c\xbb", bytes(range(256))])
def test_hex_round_trip(value: bytes) -> None:
    decoded = decode_hex(encode_hex(value), "input")
    assert (decoded or b"") == value


@pytest.mark.parametrize("raw", ["", "0x"])
def test_hex_empty_is_absent(raw: str) -> None:
    assert decode_hex(raw, "methodId") is None
    assert encode_hex(None) == "0x"


@pytest.mark.parametrize("raw", ["0x123", "0xzz", "abcd", "0x12 3"])
def test_hex_rejects_odd_length_bad_digits_or_missing_prefix(raw: str) -> None:
    with pytest.raises(MalformedHex) as excinfo:
        decode_hex(raw, "input")
    assert excinfo.value.field == "input"


def test_hex_enforces_fixed_width() -> None:
    assert decode_hex("0xa9059cbb", "methodId", 4) == bytes.fromhex("a9059cbb")
    with pytest.raises(MalformedHex):
        decode_hex("0xa9059c", "methodId", 4)


def test_decode_bytes_maps_absent_to_empty() -> None:
    assert decode_bytes("0x", "input") == b""
    assert decode_bytes("", "input") == b""
    assert decode_bytes("0x6080", "input") == b"\x60\x80"


def test_fixed_width_address_and_hash_are_normalized() -> None:
    assert decode_address("0x" + "AB" * 20, "from") == "0x" + "ab" * 20
    assert decode_hash("0x" + "0F" * 32, "hash") == "0x" + "0f" * 32
    with pytest.raises(MalformedHex):
        decode_address("0x" + "ab" * 19, "from")
    with pytest.raises(MalformedHex):
        decode_hash("", "hash")


# JSON-embedded strings


def test_embedded_empty_is_absent() -> None:
    for target in (ADDRESS, HASH, QUANTITY, TEXT):
        assert decode_json_string("", "to", target) is None
        assert encode_json_string(None, target) == ""


def test_embedded_address_and_quantity() -> None:
    assert decode_json_string("0x" + "C5" * 20, "to", ADDRESS) == "0x" + "c5" * 20
    assert decode_json_string("42", "nonce", QUANTITY) == 42
    assert decode_json_string("0x2a", "nonce", QUANTITY) == 42


def test_embedded_text_unescapes_json() -> None:
    assert decode_json_string(r"transfer(address _to, uint256 _value)", "functionName", TEXT) == (
        "transfer(address _to, uint256 _value)"
    )
    assert decode_json_string(r"café", "functionName", TEXT) == "café"


def test_embedded_text_round_trip_with_escapes() -> None:
    text = 'say "hi"\\now'
    assert decode_json_string(encode_json_string(text, TEXT), "functionName", TEXT) == text


@pytest.mark.parametrize(
    "raw,target",
    [
        ('bad"quote', TEXT),
        ("trailing\\", TEXT),
        ("0x1234", ADDRESS),
        ("not-an-address", ADDRESS),
        ("12a", QUANTITY),
    ],
)
def test_embedded_failures_are_malformed_embedded_json(raw: str, target) -> None:
    with pytest.raises(MalformedEmbeddedJson) as excinfo:
        decode_json_string(raw, "to", target)
    assert excinfo.value.field == "to"
    assert isinstance(excinfo.value, DecodeError)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("raw", ["0X", "0XA9059CBB"])
def test_hex_requires_lowercase_prefix(raw: str) -> None:
    with pytest.raises(MalformedHex):
        decode_hex(raw, "methodId")
