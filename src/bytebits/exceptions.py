"""Exception hierarchy for bytebits.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BytebitsError for easy catching of any bytebits-specific error.
"""

from __future__ import annotations


class BytebitsError(Exception):
    """Base exception for all bytebits errors."""

    pass


class InvalidArgumentError(BytebitsError, ValueError):
    """Raised when a bit field request is malformed.

    Examples:
        - Bit count is zero or negative
        - Bit count exceeds 64 for integer materialization
        - Requested field extends past the end of the byte range
        - Byte string of the wrong length for a whole-value conversion
    """

    pass


class BitIndexError(BytebitsError, IndexError):
    """Raised when an index falls outside its valid window.

    Examples:
        - Bit index outside [0, length * 8 - 1] for a flag operation
        - Sub-range offset or length outside the buffer
        - Cursor position past the end of its buffer
    """

    pass
