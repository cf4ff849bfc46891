"""
Field-level codecs for the explorer's string-encoded JSON values.

Every decoder takes the raw wire value plus the field name it came from, so a
failure can name the offending field. Encoders are the inverse direction and
produce the canonical wire string.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .errors import MalformedEmbeddedJson, MalformedHex, MalformedNumeric

U64_BITS = 64
U256_BITS = 256
ADDRESS_SIZE = 20
HASH_SIZE = 32

_DECIMAL_PATTERN = re.compile(r"[0-9]+")
_HEX_DIGITS_PATTERN = re.compile(r"[0-9a-fA-F]*")


def _has_hex_prefix(text: str) -> bool:
    return text.startswith("0x")


def _hex_to_bytes(text: str, size: Optional[int] = None) -> bytes:
    if not _has_hex_prefix(text):
        raise ValueError("missing 0x prefix")
    digits = text[2:]
    if len(digits) % 2:
        raise ValueError("odd number of hex digits")
    if not _HEX_DIGITS_PATTERN.fullmatch(digits):
        raise ValueError("invalid hex digits")
    data = bytes.fromhex(digits)
    if size is not None and len(data) != size:
        raise ValueError(f"expected {size} bytes, got {len(data)}")
    return data


def _fixed_hex(text: str, size: int) -> str:
    return "0x" + _hex_to_bytes(text, size).hex()


def _check_width(value: int, bits: int) -> int:
    if value >= 1 << bits:
        raise ValueError(f"out of range for uint{bits}")
    return value


# Numeric strings


def decode_numeric(raw: Any, field: str, bits: int = U256_BITS) -> int:
    if not isinstance(raw, str) or not _DECIMAL_PATTERN.fullmatch(raw):
        raise MalformedNumeric(field, raw, "expected a base-10 unsigned integer")
    try:
        return _check_width(int(raw), bits)
    except ValueError as exc:
        raise MalformedNumeric(field, raw, str(exc)) from exc


def decode_numeric_opt(raw: Any, field: str, bits: int = U256_BITS) -> Optional[int]:
    if raw == "":
        return None
    return decode_numeric(raw, field, bits)


def encode_numeric(value: Optional[int]) -> str:
    if value is None:
        return ""
    return str(value)


def decode_block_number(raw: Any, field: str) -> int:
    """Block numbers arrive as decimal strings, occasionally as 0x quantities."""
    if isinstance(raw, str) and _has_hex_prefix(raw):
        digits = raw[2:]
        if not digits or not _HEX_DIGITS_PATTERN.fullmatch(digits):
            raise MalformedNumeric(field, raw, "expected a hex quantity")
        try:
            return _check_width(int(digits, 16), U64_BITS)
        except ValueError as exc:
            raise MalformedNumeric(field, raw, str(exc)) from exc
    return decode_numeric(raw, field, U64_BITS)


# Hex strings


def decode_hex(raw: Any, field: str, size: Optional[int] = None) -> Optional[bytes]:
    if not isinstance(raw, str):
        raise MalformedHex(field, raw, "expected a string")
    if raw in ("", "0x"):
        return None
    try:
        return _hex_to_bytes(raw, size)
    except ValueError as exc:
        raise MalformedHex(field, raw, str(exc)) from exc


def decode_bytes(raw: Any, field: str) -> bytes:
    data = decode_hex(raw, field)
    return data if data is not None else b""


def encode_hex(value: Optional[bytes]) -> str:
    if value is None:
        return "0x"
    return "0x" + value.hex()


def decode_address(raw: Any, field: str) -> str:
    return _decode_fixed(raw, field, ADDRESS_SIZE)


def decode_hash(raw: Any, field: str) -> str:
    return _decode_fixed(raw, field, HASH_SIZE)


def _decode_fixed(raw: Any, field: str, size: int) -> str:
    if not isinstance(raw, str):
        raise MalformedHex(field, raw, "expected a string")
    try:
        return _fixed_hex(raw, size)
    except ValueError as exc:
        raise MalformedHex(field, raw, str(exc)) from exc


# JSON-embedded strings


@dataclass(frozen=True)
class EmbeddedType:
    """Target of a JSON-embedded string: how to parse the unwrapped text and render it back."""

    name: str
    parse: Callable[[str], Any]
    render: Callable[[Any], str]


def _parse_quantity(text: str) -> int:
    if _has_hex_prefix(text):
        digits = text[2:]
        if not digits or not _HEX_DIGITS_PATTERN.fullmatch(digits):
            raise ValueError("invalid hex quantity")
        return _check_width(int(digits, 16), U256_BITS)
    if not _DECIMAL_PATTERN.fullmatch(text):
        raise ValueError("invalid quantity")
    return _check_width(int(text), U256_BITS)


def _render_text(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)[1:-1]


ADDRESS = EmbeddedType("address", lambda text: _fixed_hex(text, ADDRESS_SIZE), str)
HASH = EmbeddedType("hash", lambda text: _fixed_hex(text, HASH_SIZE), str)
QUANTITY = EmbeddedType("quantity", _parse_quantity, str)
TEXT = EmbeddedType("text", str, _render_text)


def decode_json_string(raw: Any, field: str, target: EmbeddedType) -> Optional[Any]:
    if not isinstance(raw, str):
        raise MalformedEmbeddedJson(field, raw, "expected a string")
    if raw == "":
        return None
    try:
        text = json.loads(f'"{raw}"')
    except ValueError as exc:
        raise MalformedEmbeddedJson(field, raw, str(exc)) from exc
    try:
        return target.parse(text)
    except ValueError as exc:
        raise MalformedEmbeddedJson(field, raw, f"not a valid {target.name}: {exc}") from exc


def encode_json_string(value: Optional[Any], target: EmbeddedType) -> str:
    if value is None:
        return ""
    return target.render(value)
