"""Positioned byte buffer.

A ByteCursor pairs a byte buffer with a current position. Every bytebits
operation accepts a cursor in place of a plain buffer; the position then
becomes the start of the byte range the bit index is relative to.
"""

from __future__ import annotations

from typing import Union

from ..exceptions import BitIndexError

Buffer = Union[bytes, bytearray, memoryview]


class ByteCursor:
    """A byte buffer with a movable read position.

    The cursor never copies the underlying buffer, so flag operations applied
    through a cursor over a bytearray mutate that bytearray.

    Example:
        >>> cursor = ByteCursor(bytearray(b"\\x00\\x12\\x34"), position=1)
        >>> read_unsigned(cursor, 0, 16)
        4660
        >>> cursor.advance(1)
        >>> cursor.remaining()
        1
    """

    def __init__(self, buffer: Buffer, position: int = 0) -> None:
        """Initialize a cursor over the given buffer.

        Args:
            buffer: Byte buffer to wrap (not copied)
            position: Initial position in bytes

        Raises:
            TypeError: If buffer is not a bytes-like object
            BitIndexError: If position is outside [0, len(buffer)]
        """
        if not isinstance(buffer, (bytes, bytearray, memoryview)):
            raise TypeError(f"ByteCursor requires a bytes-like buffer, got {type(buffer).__name__}")
        self._buffer = buffer
        self._position = 0
        self.seek(position)

    @property
    def buffer(self) -> Buffer:
        """The wrapped buffer."""
        return self._buffer

    def position(self) -> int:
        """Return the current position in bytes."""
        return self._position

    def remaining(self) -> int:
        """Return the number of bytes between the position and the end."""
        return len(self._buffer) - self._position

    def seek(self, position: int) -> None:
        """Move to an absolute position.

        Args:
            position: New position in bytes (0 to len(buffer) inclusive)

        Raises:
            BitIndexError: If position is outside the buffer
        """
        if position < 0 or position > len(self._buffer):
            raise BitIndexError(
                f"Invalid cursor position: {position} for {len(self._buffer)}-byte buffer"
            )
        self._position = position

    def advance(self, num_bytes: int) -> None:
        """Move the position forward (or backward, if negative).

        Raises:
            BitIndexError: If the new position is outside the buffer
        """
        self.seek(self._position + num_bytes)

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"ByteCursor(position={self._position}, size={len(self._buffer)})"
