"""Kind-driven encoding and decoding of NumericValue instances.

This module provides encode() and decode(), which select the fixed-width
codec from a NumericKind instead of from the function name.
"""

from __future__ import annotations

from typing import Callable

from ..models import NumericKind, NumericValue
from ..order import ByteOrder
from .floats import decode_float32, decode_float64, encode_float32, encode_float64
from .ints import BytesLike, decode_int32, decode_int64, encode_int32, encode_int64

_ENCODERS: dict[NumericKind, Callable[..., bytes]] = {
    NumericKind.INT64: encode_int64,
    NumericKind.INT32: encode_int32,
    NumericKind.FLOAT32: encode_float32,
    NumericKind.FLOAT64: encode_float64,
}

_DECODERS: dict[NumericKind, Callable[[BytesLike, ByteOrder], int | float]] = {
    NumericKind.INT64: decode_int64,
    NumericKind.INT32: decode_int32,
    NumericKind.FLOAT32: decode_float32,
    NumericKind.FLOAT64: decode_float64,
}


def encode(value: NumericValue, order: ByteOrder) -> bytes:
    """Encode a tagged value using the codec for its kind.

    Args:
        value: NumericValue to encode
        order: Byte order of the result

    Returns:
        value.kind.num_bytes bytes

    Raises:
        EncodeError: If the value does not fit its kind
        TypeError: If value is not a NumericValue or order is not a ByteOrder

    Example:
        >>> encode(NumericValue(kind=NumericKind.INT32, value=1), ByteOrder.LITTLE)
        b'\\x01\\x00\\x00\\x00'
    """
    if not isinstance(value, NumericValue):
        raise TypeError(f"expected NumericValue, got {type(value).__name__}")
    return _ENCODERS[value.kind](value.value, order)


def decode(kind: NumericKind, data: BytesLike, order: ByteOrder) -> NumericValue:
    """Decode bytes as a value of the given kind.

    Args:
        kind: Kind to decode as
        data: Exactly kind.num_bytes bytes
        order: Byte order of data

    Returns:
        Decoded NumericValue

    Raises:
        LengthError: If data is not exactly kind.num_bytes long
        TypeError: If kind is not a NumericKind or order is not a ByteOrder
    """
    if not isinstance(kind, NumericKind):
        raise TypeError(f"expected NumericKind, got {type(kind).__name__}")
    decoded = _DECODERS[kind](data, order)
    # Already in range; skip re-validating (and NaN-aware float checks)
    return NumericValue.model_construct(kind=kind, value=decoded)
