"""Utility functions for bytebits.

This module provides byte-aligned integer conversions and human-readable
byte rendering.
"""

from __future__ import annotations

from .conversions import (
    from_int,
    from_long,
    from_short,
    from_unsigned_byte,
    from_unsigned_int,
    from_unsigned_short,
    to_int,
    to_long,
    to_short,
    to_signed_int,
    to_signed_long,
    to_signed_short,
    to_unsigned_byte,
    to_unsigned_int,
    to_unsigned_short,
)
from .formatting import (
    bytes_to_binary_string,
    bytes_to_decimal_string,
    bytes_to_hex_string,
    print_bytes_binary,
    print_bytes_hex,
    print_bytes_unsigned,
)

__all__ = [
    # Byte string <-> integer
    "to_long",
    "to_int",
    "to_short",
    "to_signed_long",
    "to_signed_int",
    "to_signed_short",
    "from_long",
    "from_int",
    "from_short",
    # Signed <-> unsigned
    "to_unsigned_byte",
    "to_unsigned_short",
    "to_unsigned_int",
    "from_unsigned_byte",
    "from_unsigned_short",
    "from_unsigned_int",
    # Rendering
    "bytes_to_binary_string",
    "bytes_to_hex_string",
    "bytes_to_decimal_string",
    "print_bytes_binary",
    "print_bytes_hex",
    "print_bytes_unsigned",
]
