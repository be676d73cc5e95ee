"""Fixed-width numeric codec for bytecodec.

This module provides the int32/int64/float32/float64 encoders and decoders
and the kind-dispatching encode()/decode() pair.
"""

from __future__ import annotations

from .floats import (
    FLOAT32_MAX,
    bits_to_float32,
    bits_to_float64,
    decode_float32,
    decode_float64,
    encode_float32,
    encode_float64,
    float32_to_bits,
    float64_to_bits,
)
from .ints import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    decode_int32,
    decode_int64,
    encode_int32,
    encode_int64,
)
from .dispatch import decode, encode

__all__ = [
    "encode",
    "decode",
    "encode_int64",
    "decode_int64",
    "encode_int32",
    "decode_int32",
    "encode_float32",
    "decode_float32",
    "encode_float64",
    "decode_float64",
    "float32_to_bits",
    "bits_to_float32",
    "float64_to_bits",
    "bits_to_float64",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "FLOAT32_MAX",
]
