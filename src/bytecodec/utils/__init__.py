"""Utility functions for bytecodec."""

from __future__ import annotations

from .sizing import encoded_bits, encoded_size

__all__ = [
    "encoded_size",
    "encoded_bits",
]
