"""Bit range extraction.

extract() copies an arbitrary run of bits out of a byte range into a new,
minimal, big-endian byte string. extract_signed() does the same and then
sign-extends the unused high bits of the first result byte.

Both use the right-to-left bit numbering of :mod:`bytebits.core.addressing`.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..exceptions import InvalidArgumentError
from .addressing import BufferLike, ByteRange, resolve
from .cursor import Buffer
from .flags import is_set

logger = logging.getLogger(__name__)


def _check_request(window: ByteRange, bit_index: int, bit_count: int) -> None:
    width = window.bit_width
    if bit_count <= 0:
        raise InvalidArgumentError(
            f"The number of bits cannot be negative or zero. Given: {bit_count}"
        )
    if bit_index < 0 or bit_index > width - 1:
        raise InvalidArgumentError(
            f"The starting bit cannot be negative or larger than {width - 1}. Given: {bit_index}"
        )
    if bit_index + bit_count > width:
        raise InvalidArgumentError(
            f"Invalid number of bits: {bit_count} starting at bit {bit_index} "
            f"exceeds the {width}-bit range"
        )


def _head_mask(bit_count: int) -> int:
    """Mask keeping only the used bits of the first result byte."""
    spill = bit_count % 8
    return 0xFF if spill == 0 else 0xFF >> (8 - spill)


def _extract(data: Buffer, window: ByteRange, bit_index: int, bit_count: int) -> bytearray:
    shift = bit_index % 8
    num_bytes = (bit_count + 7) // 8
    # Byte holding the lowest bit of the field
    low, _ = window.locate(bit_index)

    if shift == 0:
        result = bytearray(data[low - num_bytes + 1 : low + 1])
    else:
        result = bytearray(num_bytes)
        carry_shift = 8 - shift
        for i in range(num_bytes):
            src = low - i
            value = data[src] >> shift
            # The byte before the range start is never read; its bits are zero
            if src - 1 >= window.start:
                value |= (data[src - 1] << carry_shift) & 0xFF
            result[num_bytes - 1 - i] = value

    result[0] &= _head_mask(bit_count)
    return result


def extract(
    buffer: BufferLike,
    bit_index: int,
    bit_count: int,
    *,
    offset: Optional[int] = None,
    length: Optional[int] = None,
) -> bytes:
    """Extract ``bit_count`` bits starting at ``bit_index``.

    The result holds ``ceil(bit_count / 8)`` bytes, big-endian, with the
    unused high bits of the first byte set to 0.

    Args:
        buffer: Byte buffer or ByteCursor
        bit_index: Index of the lowest bit of the field
        bit_count: Field width in bits
        offset: First byte of the window the index is relative to
        length: Number of bytes in the window

    Returns:
        Newly allocated bytes holding the field

    Raises:
        BitIndexError: If the window does not fit inside the buffer
        InvalidArgumentError: If bit_count <= 0, bit_index is outside the
            window, or the field extends past the window

    Example:
        >>> data = bytes([0x80, 0x71, 0x6F, 0x5E, 0x4D, 0x3C, 0x2B, 0x1A])
        >>> extract(data, 0, 40).hex()
        '5e4d3c2b1a'
        >>> extract(b"\\xab\\xcd", 4, 8).hex()
        'bc'
    """
    data, window = resolve(buffer, offset, length)
    try:
        _check_request(window, bit_index, bit_count)
    except InvalidArgumentError:
        logger.debug(
            "Rejected extract bit_index=%d bit_count=%d over %s", bit_index, bit_count, window
        )
        raise
    return bytes(_extract(data, window, bit_index, bit_count))


def extract_signed(
    buffer: BufferLike,
    bit_index: int,
    bit_count: int,
    *,
    offset: Optional[int] = None,
    length: Optional[int] = None,
) -> bytes:
    """Extract ``bit_count`` bits and sign-extend them to whole bytes.

    Same as :func:`extract`, except that when the field's most significant
    bit is 1 the unused high bits of the first result byte are 1 as well,
    giving a two's-complement byte string of the same length.

    Raises:
        BitIndexError: If the window does not fit inside the buffer
        InvalidArgumentError: Same conditions as :func:`extract`

    Example:
        >>> extract_signed(b"\\x0e", 1, 3).hex()
        'ff'
    """
    field = bytearray(extract(buffer, bit_index, bit_count, offset=offset, length=length))
    if is_set(field, bit_count - 1):
        field[0] |= ~_head_mask(bit_count) & 0xFF
    return bytes(field)
