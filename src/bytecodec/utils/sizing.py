"""Encoded size calculation utilities.

This module provides functions to get the encoded width of a kind or value
without actually encoding it.
"""

from __future__ import annotations

from ..models import NumericKind, NumericValue


def encoded_size(kind_or_value: NumericKind | NumericValue) -> int:
    """Return the encoded width in bytes.

    Args:
        kind_or_value: NumericKind, or a NumericValue whose kind is used

    Returns:
        8 for 64-bit kinds, 4 for 32-bit kinds

    Example:
        >>> encoded_size(NumericKind.FLOAT32)
        4
        >>> encoded_size(NumericValue(kind=NumericKind.INT64, value=0))
        8
    """
    if isinstance(kind_or_value, NumericValue):
        kind_or_value = kind_or_value.kind
    if not isinstance(kind_or_value, NumericKind):
        raise TypeError(f"expected NumericKind or NumericValue, got {type(kind_or_value).__name__}")
    return kind_or_value.num_bytes


def encoded_bits(kind_or_value: NumericKind | NumericValue) -> int:
    """Return the encoded width in bits.

    Args:
        kind_or_value: NumericKind, or a NumericValue whose kind is used

    Returns:
        64 for 64-bit kinds, 32 for 32-bit kinds

    Example:
        >>> encoded_bits(NumericKind.INT32)
        32
    """
    return encoded_size(kind_or_value) * 8
