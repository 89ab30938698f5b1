"""bytebits: Bit-field codec for byte buffers

A Python library for reading and writing bit fields that are not aligned to
byte boundaries, such as 3-bit flags or 12-bit counters spanning byte edges
in binary protocols and file formats.

Bit indices are relative to a byte range and run right to left: index 0 is
the least significant bit of the last byte, and ``length * 8 - 1`` is the
most significant bit of the first byte.

Key Features:
- Extraction of arbitrary bit ranges into minimal big-endian byte strings
- Two's-complement sign extension
- Signed and unsigned integer reads of up to 64 bits
- In-place single-bit test, set and clear
- Sub-range windows and positioned cursors over any bytes-like buffer

Quick Start:
    >>> from bytebits import extract, read_signed, read_unsigned, set_bit
    >>>
    >>> data = bytes([0x80, 0x71, 0x6F, 0x5E, 0x4D, 0x3C, 0x2B, 0x1A])
    >>> extract(data, 0, 40).hex()
    '5e4d3c2b1a'
    >>> read_signed(data, 0, 8)
    26
    >>> read_unsigned(data, 60, 4)
    8
    >>> set_bit(bytearray(1), 3)
    bytearray(b'\\x08')
"""

from __future__ import annotations

__version__ = "0.1.0"

from .core import (
    ByteCursor,
    ByteRange,
    extract,
    extract_signed,
    is_set,
    read_signed,
    read_unsigned,
    set_bit,
    unset_bit,
)
from .exceptions import BitIndexError, BytebitsError, InvalidArgumentError
from .models import BitFieldRequest
from .utils import (
    bytes_to_binary_string,
    bytes_to_hex_string,
    from_int,
    from_long,
    from_short,
    to_int,
    to_long,
    to_short,
    to_signed_int,
    to_signed_long,
    to_signed_short,
)

__all__ = [
    # Core API
    "extract",
    "extract_signed",
    "read_unsigned",
    "read_signed",
    "is_set",
    "set_bit",
    "unset_bit",
    # Buffers
    "ByteRange",
    "ByteCursor",
    # Requests
    "BitFieldRequest",
    # Exceptions
    "BytebitsError",
    "InvalidArgumentError",
    "BitIndexError",
    # Conversions
    "to_long",
    "to_int",
    "to_short",
    "to_signed_long",
    "to_signed_int",
    "to_signed_short",
    "from_long",
    "from_int",
    "from_short",
    # Rendering
    "bytes_to_hex_string",
    "bytes_to_binary_string",
    # Version
    "__version__",
]
