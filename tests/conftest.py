"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from bytecodec import ByteOrder


@pytest.fixture(params=[ByteOrder.LITTLE, ByteOrder.BIG], ids=["little", "big"])
def order(request: pytest.FixtureRequest) -> ByteOrder:
    """Each supported byte order."""
    return request.param


@pytest.fixture
def sample_int64_bytes() -> bytes:
    """0x0102030405060708 in big-endian order."""
    return b"\x01\x02\x03\x04\x05\x06\x07\x08"
