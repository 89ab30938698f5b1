"""Bit-field codec core for bytebits.

This module provides bit addressing, single-bit flag operations, bit range
extraction and integer materialization over caller-supplied byte buffers.
"""

from __future__ import annotations

from .addressing import ByteRange, resolve
from .cursor import ByteCursor
from .extract import extract, extract_signed
from .flags import is_set, set_bit, unset_bit
from .materialize import read_signed, read_unsigned

__all__ = [
    "ByteRange",
    "ByteCursor",
    "resolve",
    "is_set",
    "set_bit",
    "unset_bit",
    "extract",
    "extract_signed",
    "read_unsigned",
    "read_signed",
]
