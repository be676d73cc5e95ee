"""Byte order selection."""

from __future__ import annotations

import enum


class ByteOrder(enum.Enum):
    """Arrangement of the bytes of a multi-byte value.

    LITTLE puts the least-significant byte at index 0, BIG puts the
    most-significant byte there. There is no default: every codec call
    takes an explicit ByteOrder.
    """

    LITTLE = "little"
    BIG = "big"


def check_order(order: ByteOrder) -> ByteOrder:
    """Return ``order`` unchanged, or raise TypeError if it is not a ByteOrder."""
    if not isinstance(order, ByteOrder):
        raise TypeError(f"order must be a ByteOrder, got {type(order).__name__}")
    return order
