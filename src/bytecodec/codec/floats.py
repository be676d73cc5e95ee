"""IEEE-754 floating point encoding.

Floats are converted to their raw bit pattern with ``struct`` and then
written through the integer codec, so float and integer encodings share one
byte-order implementation.
"""

from __future__ import annotations

import struct

from ..exceptions import EncodeError
from ..order import ByteOrder
from .ints import BytesLike, decode_int32, decode_int64, encode_int32, encode_int64

# Largest finite single-precision value
FLOAT32_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]


def _check_float(value: float, kind: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise EncodeError(f"{kind}: expected float, got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError as err:
        raise EncodeError(f"{kind}: value {value} too large") from err


def _check_bits(bits: int, num_bits: int) -> int:
    """Normalize a signed or unsigned bit pattern to its unsigned form."""
    if not -(1 << (num_bits - 1)) <= bits < (1 << num_bits):
        raise ValueError(f"bit pattern {bits} doesn't fit in {num_bits} bits")
    return bits & ((1 << num_bits) - 1)


def float32_to_bits(value: float) -> int:
    """Reinterpret a float's single-precision bit pattern as a signed int32.

    The value is first rounded to single precision.

    Raises:
        EncodeError: If value is not numeric or its magnitude exceeds FLOAT32_MAX

    Example:
        >>> hex(float32_to_bits(1.0))
        '0x3f800000'
    """
    value = _check_float(value, "float32")
    try:
        packed = struct.pack("<f", value)
    except OverflowError as err:
        raise EncodeError(f"float32: value {value} out of range (max: {FLOAT32_MAX})") from err
    return struct.unpack("<i", packed)[0]


def bits_to_float32(bits: int) -> float:
    """Reinterpret a 32-bit pattern (signed or unsigned) as a single-precision float."""
    return struct.unpack("<f", struct.pack("<I", _check_bits(bits, 32)))[0]


def float64_to_bits(value: float) -> int:
    """Reinterpret a float's double-precision bit pattern as a signed int64.

    Raises:
        EncodeError: If value is not numeric
    """
    value = _check_float(value, "float64")
    return struct.unpack("<q", struct.pack("<d", value))[0]


def bits_to_float64(bits: int) -> float:
    """Reinterpret a 64-bit pattern (signed or unsigned) as a double-precision float."""
    return struct.unpack("<d", struct.pack("<Q", _check_bits(bits, 64)))[0]


def encode_float32(value: float, order: ByteOrder) -> bytes:
    """Encode a float as 4 bytes of IEEE-754 single precision.

    Args:
        value: Value to encode, rounded to single precision
        order: Byte order of the result

    Returns:
        4 bytes

    Raises:
        EncodeError: If value is not numeric or overflows single precision

    Example:
        >>> encode_float32(3.14, ByteOrder.BIG)
        b'@H\\xf5\\xc3'
    """
    return encode_int32(float32_to_bits(value), order)


def decode_float32(data: BytesLike, order: ByteOrder) -> float:
    """Decode 4 bytes of IEEE-754 single precision.

    Args:
        data: Exactly 4 bytes
        order: Byte order of data

    Returns:
        The single-precision value as a Python float

    Raises:
        LengthError: If data is not exactly 4 bytes
    """
    return bits_to_float32(decode_int32(data, order))


def encode_float64(value: float, order: ByteOrder) -> bytes:
    """Encode a float as 8 bytes of IEEE-754 double precision.

    Args:
        value: Value to encode
        order: Byte order of the result

    Returns:
        8 bytes

    Raises:
        EncodeError: If value is not numeric
    """
    return encode_int64(float64_to_bits(value), order)


def decode_float64(data: BytesLike, order: ByteOrder) -> float:
    """Decode 8 bytes of IEEE-754 double precision.

    Args:
        data: Exactly 8 bytes
        order: Byte order of data

    Returns:
        Decoded float

    Raises:
        LengthError: If data is not exactly 8 bytes
    """
    return bits_to_float64(decode_int64(data, order))
