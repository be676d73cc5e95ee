"""bytecodec: Fixed-Width Numeric Byte Codec

Converts 64-bit and 32-bit signed integers and IEEE-754 single/double
precision floats to and from their raw bytes, in little-endian or big-endian
order. Every call is pure and takes its byte order explicitly.

Quick Start:
    >>> from bytecodec import ByteOrder, decode_int32, encode_int32
    >>> encode_int32(1, ByteOrder.LITTLE)
    b'\\x01\\x00\\x00\\x00'
    >>> decode_int32(b"\\x00\\x00\\x00\\x01", ByteOrder.BIG)
    1
    >>> decode_int32(b"\\x01\\x02\\x03", ByteOrder.LITTLE)
    Traceback (most recent call last):
    ...
    bytecodec.exceptions.LengthError: expected 4 bytes, got 3
"""

from __future__ import annotations

from .codec import (
    FLOAT32_MAX,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    bits_to_float32,
    bits_to_float64,
    decode,
    decode_float32,
    decode_float64,
    decode_int32,
    decode_int64,
    encode,
    encode_float32,
    encode_float64,
    encode_int32,
    encode_int64,
    float32_to_bits,
    float64_to_bits,
)
from .exceptions import ByteCodecError, DecodeError, EncodeError, LengthError
from .models import NumericKind, NumericValue
from .order import ByteOrder
from .utils import encoded_bits, encoded_size

__version__ = "0.1.0"

__all__ = [
    # Byte order
    "ByteOrder",
    # Fixed-width codecs
    "encode_int64",
    "decode_int64",
    "encode_int32",
    "decode_int32",
    "encode_float32",
    "decode_float32",
    "encode_float64",
    "decode_float64",
    # Bit casts
    "float32_to_bits",
    "bits_to_float32",
    "float64_to_bits",
    "bits_to_float64",
    # Tagged values
    "NumericKind",
    "NumericValue",
    "encode",
    "decode",
    # Sizing
    "encoded_size",
    "encoded_bits",
    # Limits
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "FLOAT32_MAX",
    # Exceptions
    "ByteCodecError",
    "EncodeError",
    "DecodeError",
    "LengthError",
    # Version
    "__version__",
]
