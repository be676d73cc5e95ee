"""Value models for bytecodec.

This module provides the NumericKind enumeration and the NumericValue
Pydantic model used by the kind-dispatching codec.
"""

from __future__ import annotations

from .kind import NumericKind
from .value import NumericValue

__all__ = [
    "NumericKind",
    "NumericValue",
]
