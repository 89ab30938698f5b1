"""Integer materialization of bit fields.

read_unsigned() and read_signed() extract a field of at most 64 bits and
compose it into a 64-bit value.

Signed reads use a pre-filled accumulator: when the field's sign bit is set
the accumulator starts as all ones, otherwise as zero, and each extracted
byte then replaces exactly its own 8-bit slot. Slots above the field keep
their pre-filled value, which carries the sign up to bit 63.
"""

from __future__ import annotations

from typing import Optional

from ..exceptions import InvalidArgumentError
from .addressing import BufferLike
from .extract import extract, extract_signed
from .flags import is_set

MAX_BITS = 64
UINT64_MASK = (1 << MAX_BITS) - 1
SIGN_BIT_64 = 1 << (MAX_BITS - 1)


def _check_width(bit_count: int) -> None:
    if bit_count > MAX_BITS:
        raise InvalidArgumentError(
            f"The number of bits cannot be greater than {MAX_BITS}. Given: {bit_count}"
        )


def _prefill(negative: bool) -> int:
    return UINT64_MASK if negative else 0


def read_unsigned(
    buffer: BufferLike,
    bit_index: int,
    bit_count: int,
    *,
    offset: Optional[int] = None,
    length: Optional[int] = None,
) -> int:
    """Read a field of up to 64 bits as an unsigned integer.

    Args:
        buffer: Byte buffer or ByteCursor
        bit_index: Index of the lowest bit of the field
        bit_count: Field width in bits (1-64)
        offset: First byte of the window the index is relative to
        length: Number of bytes in the window

    Returns:
        Value in the range [0, 2**64)

    Raises:
        InvalidArgumentError: If bit_count > 64, or any extract() argument error
        BitIndexError: If the window does not fit inside the buffer

    Example:
        >>> hex(read_unsigned(bytes([0x6F, 0x5E, 0x4D]), 4, 12))
        '0x5e4'
    """
    _check_width(bit_count)
    field = extract(buffer, bit_index, bit_count, offset=offset, length=length)

    result = 0
    for slot, byte in enumerate(reversed(field)):
        result |= byte << (8 * slot)
    return result


def read_signed(
    buffer: BufferLike,
    bit_index: int,
    bit_count: int,
    *,
    offset: Optional[int] = None,
    length: Optional[int] = None,
) -> int:
    """Read a field of up to 64 bits as a two's-complement signed integer.

    Args:
        buffer: Byte buffer or ByteCursor
        bit_index: Index of the lowest bit of the field
        bit_count: Field width in bits (1-64)
        offset: First byte of the window the index is relative to
        length: Number of bytes in the window

    Returns:
        Value in the range [-2**63, 2**63)

    Raises:
        InvalidArgumentError: If bit_count > 64, or any extract() argument error
        BitIndexError: If the window does not fit inside the buffer

    Example:
        >>> read_signed(b"\\xf0", 4, 4)
        -1
    """
    _check_width(bit_count)
    field = extract_signed(buffer, bit_index, bit_count, offset=offset, length=length)

    result = _prefill(is_set(field, bit_count - 1))
    for slot, byte in enumerate(reversed(field)):
        shift = 8 * slot
        result = (result & ~(0xFF << shift)) | (byte << shift)
    result &= UINT64_MASK

    if result & SIGN_BIT_64:
        return result - (1 << MAX_BITS)
    return result
