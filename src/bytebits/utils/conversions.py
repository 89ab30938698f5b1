"""Whole-value conversions between byte strings and integers.

These helpers cover the byte-aligned cases: big-endian byte strings of up to
2, 4 or 8 bytes to and from 16, 32 and 64-bit integers, and the unsigned
reinterpretation of signed 8, 16 and 32-bit values.
"""

from __future__ import annotations

import struct

from ..exceptions import InvalidArgumentError

_WIDTHS = {"short": 2, "int": 4, "long": 8}
_PACK_FORMATS = {"short": ">H", "int": ">I", "long": ">Q"}


def _to_value(data: bytes, kind: str, signed: bool) -> int:
    max_len = _WIDTHS[kind]
    if len(data) < 1 or len(data) > max_len:
        raise InvalidArgumentError(f"Array of size {len(data)} cannot be converted to {kind}.")
    return int.from_bytes(data, "big", signed=signed)


def to_long(data: bytes) -> int:
    """Convert 1-8 big-endian bytes to an unsigned integer, zero-padded.

    Raises:
        InvalidArgumentError: If data is empty or longer than 8 bytes
    """
    return _to_value(data, "long", signed=False)


def to_int(data: bytes) -> int:
    """Convert 1-4 big-endian bytes to an unsigned integer, zero-padded."""
    return _to_value(data, "int", signed=False)


def to_short(data: bytes) -> int:
    """Convert 1-2 big-endian bytes to an unsigned integer, zero-padded."""
    return _to_value(data, "short", signed=False)


def to_signed_long(data: bytes) -> int:
    """Convert 1-8 big-endian bytes to a signed integer.

    If the most significant bit of the first byte is 1, the value is padded
    with ones, i.e. the bytes are read as two's complement.

    Example:
        >>> to_signed_long(b"\\xff\\xfe")
        -2
    """
    return _to_value(data, "long", signed=True)


def to_signed_int(data: bytes) -> int:
    """Convert 1-4 big-endian bytes to a signed integer."""
    return _to_value(data, "int", signed=True)


def to_signed_short(data: bytes) -> int:
    """Convert 1-2 big-endian bytes to a signed integer."""
    return _to_value(data, "short", signed=True)


def _from_value(value: int, kind: str) -> bytes:
    bits = _WIDTHS[kind] * 8
    if value < -(1 << (bits - 1)) or value >= (1 << bits):
        raise InvalidArgumentError(f"Value {value} does not fit in a {bits}-bit {kind}")
    return struct.pack(_PACK_FORMATS[kind], value & ((1 << bits) - 1))


def from_long(value: int) -> bytes:
    """Convert a 64-bit value (signed or unsigned) to 8 big-endian bytes.

    Example:
        >>> from_long(-1).hex()
        'ffffffffffffffff'
    """
    return _from_value(value, "long")


def from_int(value: int) -> bytes:
    """Convert a 32-bit value (signed or unsigned) to 4 big-endian bytes."""
    return _from_value(value, "int")


def from_short(value: int) -> bytes:
    """Convert a 16-bit value (signed or unsigned) to 2 big-endian bytes."""
    return _from_value(value, "short")


def _widen(value: int, bits: int) -> int:
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if value < low or value > high:
        raise InvalidArgumentError(
            f"Signed {bits}-bit values should be in the range {low}..{high}, got: {value}"
        )
    return value & ((1 << bits) - 1)


def _narrow(value: int, bits: int) -> int:
    if value < 0 or value >= (1 << bits):
        raise InvalidArgumentError(
            f"Unsigned {bits}-bit values should be in the range 0..{(1 << bits) - 1}, got: {value}"
        )
    return value - (1 << bits) if value >= (1 << (bits - 1)) else value


def to_unsigned_byte(value: int) -> int:
    """Reinterpret a signed byte (-128..127) as unsigned (0..255).

    Example:
        >>> to_unsigned_byte(-1)
        255
    """
    return _widen(value, 8)


def to_unsigned_short(value: int) -> int:
    """Reinterpret a signed 16-bit value as unsigned (0..65535)."""
    return _widen(value, 16)


def to_unsigned_int(value: int) -> int:
    """Reinterpret a signed 32-bit value as unsigned (0..4294967295)."""
    return _widen(value, 32)


def from_unsigned_byte(value: int) -> int:
    """Reinterpret an unsigned byte (0..255) as signed (-128..127).

    Raises:
        InvalidArgumentError: If value is outside 0..255
    """
    return _narrow(value, 8)


def from_unsigned_short(value: int) -> int:
    """Reinterpret an unsigned 16-bit value as signed (-32768..32767)."""
    return _narrow(value, 16)


def from_unsigned_int(value: int) -> int:
    """Reinterpret an unsigned 32-bit value as signed."""
    return _narrow(value, 32)
