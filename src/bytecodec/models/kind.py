"""Numeric kinds supported by the codec."""

from __future__ import annotations

import enum


class NumericKind(enum.Enum):
    """Fixed-width numeric primitive.

    Each member knows its encoded width and whether it holds an integer.
    """

    INT64 = "int64"
    INT32 = "int32"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def num_bytes(self) -> int:
        """Encoded width in bytes."""
        return 8 if self in (NumericKind.INT64, NumericKind.FLOAT64) else 4

    @property
    def num_bits(self) -> int:
        return self.num_bytes * 8

    @property
    def is_integer(self) -> bool:
        return self in (NumericKind.INT64, NumericKind.INT32)
