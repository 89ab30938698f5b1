"""Single-bit test, set and clear operations.

set_bit and unset_bit mutate the caller's buffer in place and return the same
object for chaining. Copy the buffer first if the original must survive.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from .addressing import BufferLike, resolve
from .cursor import Buffer, ByteCursor

B = TypeVar("B", bytearray, memoryview, ByteCursor)


def _require_writable(data: Buffer, operation: str) -> None:
    if isinstance(data, bytes) or (isinstance(data, memoryview) and data.readonly):
        raise TypeError(
            f"{operation} requires a mutable buffer, got read-only {type(data).__name__}"
        )


def is_set(
    buffer: BufferLike,
    index: int,
    *,
    offset: Optional[int] = None,
    length: Optional[int] = None,
) -> bool:
    """Check whether the bit at the given index is 1.

    Args:
        buffer: Byte buffer or ByteCursor
        index: Bit index, 0 being the least significant bit of the last byte
        offset: First byte of the window the index is relative to
        length: Number of bytes in the window

    Returns:
        True if the bit is set, False otherwise

    Raises:
        BitIndexError: If the window or the index is out of range

    Example:
        >>> is_set(b"\\x80", 7)
        True
        >>> is_set(b"\\x80", 0)
        False
    """
    data, window = resolve(buffer, offset, length)
    byte_offset, bit_offset = window.locate(index)
    return bool(data[byte_offset] & (1 << bit_offset))


def set_bit(
    buffer: B,
    index: int,
    *,
    offset: Optional[int] = None,
    length: Optional[int] = None,
) -> B:
    """Set the bit at the given index to 1, in place.

    Args:
        buffer: Mutable byte buffer or ByteCursor over one
        index: Bit index, 0 being the least significant bit of the last byte
        offset: First byte of the window the index is relative to
        length: Number of bytes in the window

    Returns:
        The same buffer object that was passed in

    Raises:
        TypeError: If the buffer is immutable
        BitIndexError: If the window or the index is out of range
    """
    data, window = resolve(buffer, offset, length)
    _require_writable(data, "set_bit")
    byte_offset, bit_offset = window.locate(index)
    data[byte_offset] |= 1 << bit_offset
    return buffer


def unset_bit(
    buffer: B,
    index: int,
    *,
    offset: Optional[int] = None,
    length: Optional[int] = None,
) -> B:
    """Set the bit at the given index to 0, in place.

    Args:
        buffer: Mutable byte buffer or ByteCursor over one
        index: Bit index, 0 being the least significant bit of the last byte
        offset: First byte of the window the index is relative to
        length: Number of bytes in the window

    Returns:
        The same buffer object that was passed in

    Raises:
        TypeError: If the buffer is immutable
        BitIndexError: If the window or the index is out of range

    Example:
        >>> unset_bit(bytearray(b"\\x80"), 7)
        bytearray(b'\\x00')
    """
    data, window = resolve(buffer, offset, length)
    _require_writable(data, "unset_bit")
    byte_offset, bit_offset = window.locate(index)
    data[byte_offset] &= ~(1 << bit_offset) & 0xFF
    return buffer
