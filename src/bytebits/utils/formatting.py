"""Human-readable rendering of byte strings.

Each byte is rendered on its own and separated from the next by a single
space, e.g. ``"80 71"`` (hex) or ``"10000000 01110001"`` (binary).
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def bytes_to_binary_string(data: bytes) -> str:
    """Render bytes as 8-digit binary groups.

    Example:
        >>> bytes_to_binary_string(b"\\x80\\x05")
        '10000000 00000101'
    """
    return " ".join(f"{byte:08b}" for byte in data)


def bytes_to_hex_string(data: bytes) -> str:
    """Render bytes as 2-digit uppercase hexadecimal groups.

    Example:
        >>> bytes_to_hex_string(b"\\x80\\x0a")
        '80 0A'
    """
    return " ".join(f"{byte:02X}" for byte in data)


def bytes_to_decimal_string(data: bytes) -> str:
    """Render bytes as unsigned decimal values (0-255)."""
    return " ".join(str(byte) for byte in data)


def print_bytes_binary(data: bytes, out: Optional[TextIO] = None) -> None:
    """Print bytes in binary form, one line, to ``out`` (stdout by default)."""
    print(bytes_to_binary_string(data), file=out or sys.stdout)


def print_bytes_hex(data: bytes, out: Optional[TextIO] = None) -> None:
    """Print bytes in hexadecimal form, one line, to ``out`` (stdout by default)."""
    print(bytes_to_hex_string(data), file=out or sys.stdout)


def print_bytes_unsigned(data: bytes, out: Optional[TextIO] = None) -> None:
    """Print bytes as unsigned decimals, one line, to ``out`` (stdout by default)."""
    print(bytes_to_decimal_string(data), file=out or sys.stdout)
