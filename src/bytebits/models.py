"""Validated bit field requests.

BitFieldRequest bundles the arguments of one extraction (bit index, bit
count, signedness and an optional byte window) into a Pydantic model, so
that requests coming from user input are validated once and can be
applied to any number of buffers.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .core import extract, extract_signed, read_signed, read_unsigned
from .core.addressing import BufferLike


class BitFieldRequest(BaseModel):
    """A request for ``bit_count`` bits starting at ``bit_index``.

    Only argument shapes are checked here; whether the field fits inside a
    particular buffer is checked when the request is applied.

    Example:
        >>> request = BitFieldRequest(bit_index=4, bit_count=12, signed=True)
        >>> request.read(b"\\x6f\\x5e\\x4d")
        1508

    Attributes:
        bit_index: Index of the lowest bit of the field
        bit_count: Field width in bits
        signed: Whether to sign-extend the field
        offset: First byte of the window (defaults to 0 or the cursor position)
        length: Number of bytes in the window (defaults to the rest of the buffer)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    bit_index: int = Field(ge=0)
    bit_count: int = Field(ge=1)
    signed: bool = False
    offset: Optional[int] = Field(default=None, ge=0)
    length: Optional[int] = Field(default=None, ge=0)

    def extract(self, buffer: BufferLike) -> bytes:
        """Extract this field from ``buffer`` as a byte string."""
        func = extract_signed if self.signed else extract
        return func(buffer, self.bit_index, self.bit_count, offset=self.offset, length=self.length)

    def read(self, buffer: BufferLike) -> int:
        """Read this field from ``buffer`` as an integer.

        Raises:
            InvalidArgumentError: If bit_count is over 64 or the field does not fit
            BitIndexError: If the window does not fit inside the buffer
        """
        func = read_signed if self.signed else read_unsigned
        return func(buffer, self.bit_index, self.bit_count, offset=self.offset, length=self.length)
