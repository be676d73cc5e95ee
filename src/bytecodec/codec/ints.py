"""Fixed-width signed integer encoding.

Integers are written in two's complement, one byte at a time, in the byte
order the caller selects. Decoding accumulates every byte as unsigned
(masked with 0xFF) and applies the sign only once, from the top bit of the
most-significant byte.
"""

from __future__ import annotations

from ..exceptions import EncodeError, LengthError
from ..order import ByteOrder, check_order

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

BytesLike = bytes | bytearray | memoryview


def _encode_signed(value: int, num_bytes: int, order: ByteOrder) -> bytes:
    """Encode a signed integer into exactly ``num_bytes`` bytes.

    Args:
        value: Signed integer value to write
        num_bytes: Output width in bytes (4 or 8)
        order: Byte order of the result

    Returns:
        Two's complement representation of ``value``

    Raises:
        EncodeError: If value is not an int or doesn't fit in num_bytes
        TypeError: If order is not a ByteOrder
    """
    check_order(order)
    num_bits = num_bytes * 8

    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(f"int{num_bits}: expected int, got {type(value).__name__}")

    min_value = -(1 << (num_bits - 1))
    max_value = (1 << (num_bits - 1)) - 1
    if value < min_value or value > max_value:
        raise EncodeError(
            f"Value {value} doesn't fit in int{num_bits} (range: {min_value} to {max_value})"
        )

    # Convert to unsigned representation using two's complement
    unsigned_value = value & ((1 << num_bits) - 1)

    # Least significant byte first
    result = bytearray()
    for i in range(num_bytes):
        result.append((unsigned_value >> (8 * i)) & 0xFF)

    if order is ByteOrder.BIG:
        result.reverse()

    return bytes(result)


def _decode_signed(data: BytesLike, num_bytes: int, order: ByteOrder) -> int:
    """Decode exactly ``num_bytes`` bytes as a signed integer.

    Raises:
        LengthError: If data is not exactly num_bytes long
        TypeError: If data is not bytes-like or order is not a ByteOrder
    """
    check_order(order)
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes-like, got {type(data).__name__}")

    raw = bytes(data)
    if len(raw) != num_bytes:
        raise LengthError(expected=num_bytes, actual=len(raw))

    if order is ByteOrder.LITTLE:
        raw = raw[::-1]

    # raw is now most significant byte first
    unsigned_value = 0
    for byte in raw:
        unsigned_value = (unsigned_value << 8) | (byte & 0xFF)

    num_bits = num_bytes * 8
    sign_bit = 1 << (num_bits - 1)
    if unsigned_value & sign_bit:
        return unsigned_value - (1 << num_bits)
    return unsigned_value


def encode_int64(value: int, order: ByteOrder) -> bytes:
    """Encode a 64-bit signed integer as 8 bytes.

    Args:
        value: Integer in [-2**63, 2**63 - 1]
        order: Byte order of the result

    Returns:
        8 bytes. With ByteOrder.LITTLE byte 0 holds bits [0:8) and byte 7
        holds bits [56:64); ByteOrder.BIG reverses that.

    Raises:
        EncodeError: If value is not an int or is out of range

    Example:
        >>> encode_int64(-1, ByteOrder.LITTLE)
        b'\\xff\\xff\\xff\\xff\\xff\\xff\\xff\\xff'
    """
    return _encode_signed(value, 8, order)


def decode_int64(data: BytesLike, order: ByteOrder) -> int:
    """Decode 8 bytes as a 64-bit signed integer.

    Args:
        data: Exactly 8 bytes (bytes, bytearray or memoryview)
        order: Byte order of data

    Returns:
        Integer in [-2**63, 2**63 - 1]

    Raises:
        LengthError: If data is not exactly 8 bytes
    """
    return _decode_signed(data, 8, order)


def encode_int32(value: int, order: ByteOrder) -> bytes:
    """Encode a 32-bit signed integer as 4 bytes.

    Args:
        value: Integer in [-2**31, 2**31 - 1]
        order: Byte order of the result

    Returns:
        4 bytes of the two's complement representation

    Raises:
        EncodeError: If value is not an int or is out of range

    Example:
        >>> encode_int32(1, ByteOrder.BIG)
        b'\\x00\\x00\\x00\\x01'
    """
    return _encode_signed(value, 4, order)


def decode_int32(data: BytesLike, order: ByteOrder) -> int:
    """Decode 4 bytes as a 32-bit signed integer.

    Args:
        data: Exactly 4 bytes (bytes, bytearray or memoryview)
        order: Byte order of data

    Returns:
        Integer in [-2**31, 2**31 - 1]

    Raises:
        LengthError: If data is not exactly 4 bytes
    """
    return _decode_signed(data, 4, order)
