"""Bit addressing within a byte range.

Bit indices are relative to a byte range and run right to left: index 0 is
the least significant bit of the LAST byte of the range, and index
``length * 8 - 1`` is the most significant bit of the FIRST byte. Every
operation in bytebits locates bits through :meth:`ByteRange.locate`.

    range:      [ byte 0 ][ byte 1 ][ byte 2 ]
    bit index:   23 ... 16 15 ...  8  7 ...  0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..exceptions import BitIndexError
from .cursor import Buffer, ByteCursor

logger = logging.getLogger(__name__)

BufferLike = Union[bytes, bytearray, memoryview, ByteCursor]


@dataclass(frozen=True)
class ByteRange:
    """A window ``[start, start + length)`` into a byte buffer.

    Attributes:
        start: Index of the first byte of the window
        length: Number of bytes in the window
    """

    start: int
    length: int

    @property
    def end(self) -> int:
        """Index one past the last byte of the window."""
        return self.start + self.length

    @property
    def bit_width(self) -> int:
        """Number of addressable bits in the window."""
        return self.length * 8

    def locate(self, index: int) -> tuple[int, int]:
        """Map a bit index to its (byte offset, bit offset) pair.

        The byte offset is absolute within the underlying buffer; the bit
        offset is the position inside that byte, 0 being the least
        significant bit.

        Args:
            index: Bit index relative to this window

        Returns:
            Tuple of (byte_offset, bit_offset)

        Raises:
            BitIndexError: If index is outside [0, bit_width - 1]
        """
        if index < 0 or index > self.bit_width - 1:
            raise BitIndexError(f"Invalid bit index: {index} for {self.length}-byte range")
        return self.end - (index // 8) - 1, index % 8


def resolve(
    buffer: BufferLike,
    offset: Optional[int] = None,
    length: Optional[int] = None,
) -> tuple[Buffer, ByteRange]:
    """Resolve a buffer and optional window into raw data plus a ByteRange.

    ``offset`` defaults to 0, or to the cursor position when a ByteCursor is
    given. ``length`` defaults to every byte from ``offset`` to the end.

    Args:
        buffer: bytes, bytearray, memoryview or ByteCursor
        offset: Index of the first byte of the window
        length: Number of bytes in the window

    Returns:
        Tuple of (underlying buffer, window)

    Raises:
        TypeError: If buffer is not bytes-like
        BitIndexError: If the window does not fit inside the buffer
    """
    if isinstance(buffer, ByteCursor):
        data = buffer.buffer
        if offset is None:
            offset = buffer.position()
    elif isinstance(buffer, (bytes, bytearray, memoryview)):
        data = buffer
    else:
        raise TypeError(f"Expected a bytes-like buffer, got {type(buffer).__name__}")

    if isinstance(data, memoryview) and data.format != "B":
        data = data.cast("B")

    if offset is None:
        offset = 0
    if length is None:
        length = len(data) - offset

    if offset < 0 or length < 0 or offset + length > len(data):
        logger.debug("Rejected window offset=%d length=%d over %d bytes", offset, length, len(data))
        raise BitIndexError(
            f"Invalid sub-array bounds - offset: {offset}, length: {length} "
            f"for {len(data)}-byte array"
        )

    return data, ByteRange(offset, length)
