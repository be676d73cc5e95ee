#!/usr/bin/env python3
"""Basic usage example for bytecodec.

This example demonstrates:
1. Encoding integers and floats in both byte orders
2. Decoding them back
3. Tagged values with kind dispatch
4. Handling a length mismatch
"""

from __future__ import annotations

from bytecodec import (
    ByteOrder,
    LengthError,
    NumericKind,
    NumericValue,
    decode,
    decode_float32,
    decode_int32,
    encode,
    encode_float32,
    encode_int32,
    encode_int64,
    encoded_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bytecodec Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding integers...")
    for order in ByteOrder:
        print(f"   int32 1 ({order.value}): {encode_int32(1, order).hex(' ')}")
    print(f"   int64 -1 (little): {encode_int64(-1, ByteOrder.LITTLE).hex(' ')}")
    print()

    print("2. Round-tripping a float32...")
    data = encode_float32(3.14, ByteOrder.BIG)
    print(f"   3.14 (big): {data.hex(' ')}")
    print(f"   decoded: {decode_float32(data, ByteOrder.BIG)!r}")
    print()

    print("3. Tagged values...")
    value = NumericValue(kind=NumericKind.INT64, value=1_760_659_200_000)
    data = encode(value, ByteOrder.LITTLE)
    print(f"   {value.kind.value} -> {encoded_size(value)} bytes: {data.hex(' ')}")
    print(f"   decoded: {decode(NumericKind.INT64, data, ByteOrder.LITTLE).value}")
    print()

    print("4. Length mismatch...")
    try:
        decode_int32(b"\x01\x02\x03", ByteOrder.LITTLE)
    except LengthError as err:
        print(f"   LengthError: {err}")
    print()


if __name__ == "__main__":
    main()
