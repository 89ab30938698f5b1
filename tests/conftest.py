"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_buffer() -> bytes:
    """Eight-byte buffer with distinct byte values."""
    return bytes([0x80, 0x71, 0x6F, 0x5E, 0x4D, 0x3C, 0x2B, 0x1A])


@pytest.fixture
def mutable_buffer(sample_buffer: bytes) -> bytearray:
    """Mutable copy of the sample buffer."""
    return bytearray(sample_buffer)
