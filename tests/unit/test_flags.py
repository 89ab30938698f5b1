"""Unit tests for single-bit flag operations."""

from __future__ import annotations

import pytest

from bytebits.core.cursor import ByteCursor
from bytebits.core.flags import is_set, set_bit, unset_bit
from bytebits.exceptions import BitIndexError


class TestIsSet:
    """Test is_set."""

    def test_single_byte(self) -> None:
        """Test the MSB and LSB of a single byte."""
        assert is_set(b"\x80", 7) is True
        assert is_set(b"\x80", 0) is False

    def test_multi_byte_numbering(self, sample_buffer: bytes) -> None:
        """Test bits are numbered from the last byte's LSB."""
        # Last byte 0x1A = 00011010
        assert is_set(sample_buffer, 0) is False
        assert is_set(sample_buffer, 1) is True
        assert is_set(sample_buffer, 3) is True
        # First byte 0x80
        assert is_set(sample_buffer, 63) is True
        assert is_set(sample_buffer, 62) is False

    def test_sub_range(self) -> None:
        """Test indices relative to a window."""
        data = bytes([0xFF, 0x01, 0xFF])
        assert is_set(data, 0, offset=1, length=1) is True
        assert is_set(data, 1, offset=1, length=1) is False

    def test_cursor(self) -> None:
        """Test indices relative to a cursor position."""
        cursor = ByteCursor(bytes([0x01, 0x00]), position=0)
        assert is_set(cursor, 8) is True
        cursor.seek(1)
        assert is_set(cursor, 0) is False

    @pytest.mark.parametrize("index", [-1, 8])
    def test_out_of_range(self, index: int) -> None:
        """Test indices outside the buffer."""
        with pytest.raises(BitIndexError, match="Invalid bit index"):
            is_set(b"\x80", index)

    def test_out_of_window(self) -> None:
        """Test indices inside the buffer but outside the window."""
        with pytest.raises(BitIndexError):
            is_set(bytes(3), 8, offset=1, length=1)


class TestSetBit:
    """Test set_bit."""

    def test_sets_bit(self) -> None:
        """Test setting a clear bit."""
        buf = bytearray(2)
        set_bit(buf, 9)
        assert buf == bytearray([0x02, 0x00])

    def test_returns_same_object(self) -> None:
        """Test the buffer is mutated in place and returned."""
        buf = bytearray(1)
        assert set_bit(buf, 0) is buf
        assert buf == bytearray(b"\x01")

    def test_already_set(self) -> None:
        """Test setting a set bit is a no-op."""
        buf = bytearray(b"\xff")
        assert set_bit(buf, 4) == bytearray(b"\xff")

    def test_chaining(self) -> None:
        """Test chained calls on the returned buffer."""
        buf = set_bit(set_bit(bytearray(1), 0), 7)
        assert buf == bytearray(b"\x81")

    def test_sub_range(self) -> None:
        """Test setting a bit inside a window."""
        buf = bytearray(3)
        set_bit(buf, 0, offset=0, length=2)
        assert buf == bytearray([0x00, 0x01, 0x00])

    def test_cursor(self) -> None:
        """Test setting through a cursor mutates the wrapped buffer."""
        buf = bytearray(3)
        cursor = ByteCursor(buf, position=1)
        assert set_bit(cursor, 8) is cursor
        assert buf == bytearray([0x00, 0x01, 0x00])

    def test_writable_memoryview(self) -> None:
        """Test setting through a writable memoryview."""
        buf = bytearray(2)
        set_bit(memoryview(buf), 15)
        assert buf == bytearray([0x80, 0x00])

    def test_rejects_bytes(self) -> None:
        """Test immutable buffers are rejected."""
        with pytest.raises(TypeError, match="mutable"):
            set_bit(b"\x00", 0)  # type: ignore[type-var]

    def test_rejects_readonly_memoryview(self) -> None:
        """Test read-only views are rejected."""
        with pytest.raises(TypeError, match="mutable"):
            set_bit(memoryview(b"\x00"), 0)

    def test_out_of_range_leaves_buffer_unchanged(self) -> None:
        """Test a rejected index performs no mutation."""
        buf = bytearray(b"\x12\x34")
        with pytest.raises(BitIndexError):
            set_bit(buf, 16)
        assert buf == bytearray(b"\x12\x34")


class TestUnsetBit:
    """Test unset_bit."""

    def test_clears_msb(self) -> None:
        """Test clearing the only set bit of 0x80."""
        buf = bytearray(b"\x80")
        assert unset_bit(buf, 7) == bytearray(b"\x00")

    def test_returns_same_object(self) -> None:
        """Test the buffer is mutated in place and returned."""
        buf = bytearray(b"\xff\xff")
        assert unset_bit(buf, 8) is buf
        assert buf == bytearray(b"\xfe\xff")

    def test_already_clear(self) -> None:
        """Test clearing a clear bit is a no-op."""
        buf = bytearray(b"\xf0")
        assert unset_bit(buf, 0) == bytearray(b"\xf0")

    def test_sub_range(self) -> None:
        """Test clearing a bit inside a window."""
        buf = bytearray(b"\xff\xff\xff")
        unset_bit(buf, 7, offset=1, length=1)
        assert buf == bytearray(b"\xff\x7f\xff")

    def test_rejects_bytes(self) -> None:
        """Test immutable buffers are rejected."""
        with pytest.raises(TypeError):
            unset_bit(b"\xff", 0)  # type: ignore[type-var]

    @pytest.mark.parametrize("index", [-1, 8])
    def test_out_of_range(self, index: int) -> None:
        """Test indices outside the buffer."""
        buf = bytearray(b"\xff")
        with pytest.raises(BitIndexError):
            unset_bit(buf, index)
        assert buf == bytearray(b"\xff")
