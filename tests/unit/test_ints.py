"""Unit tests for fixed-width integer encoding."""

from __future__ import annotations

import pytest

from bytecodec import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    ByteOrder,
    DecodeError,
    EncodeError,
    LengthError,
    decode_int32,
    decode_int64,
    encode_int32,
    encode_int64,
)


class TestEncodeInt32:
    """Test encode_int32."""

    def test_one(self) -> None:
        """Test the byte layout of 1 in each order."""
        assert encode_int32(1, ByteOrder.LITTLE) == b"\x01\x00\x00\x00"
        assert encode_int32(1, ByteOrder.BIG) == b"\x00\x00\x00\x01"

    def test_byte_positions(self) -> None:
        """Test each byte lands in its own slot."""
        assert encode_int32(0x01020304, ByteOrder.LITTLE) == b"\x04\x03\x02\x01"
        assert encode_int32(0x01020304, ByteOrder.BIG) == b"\x01\x02\x03\x04"

    def test_negative(self) -> None:
        """Test two's complement for negative values."""
        assert encode_int32(-1, ByteOrder.LITTLE) == b"\xff\xff\xff\xff"
        assert encode_int32(-2, ByteOrder.BIG) == b"\xff\xff\xff\xfe"
        assert encode_int32(-2, ByteOrder.LITTLE) == b"\xfe\xff\xff\xff"

    def test_limits(self) -> None:
        """Test the extreme representable values."""
        assert encode_int32(INT32_MAX, ByteOrder.BIG) == b"\x7f\xff\xff\xff"
        assert encode_int32(INT32_MIN, ByteOrder.BIG) == b"\x80\x00\x00\x00"

    def test_out_of_range(self) -> None:
        """Test values outside int32 are rejected."""
        with pytest.raises(EncodeError, match="doesn't fit"):
            encode_int32(INT32_MAX + 1, ByteOrder.LITTLE)

        with pytest.raises(EncodeError, match="doesn't fit"):
            encode_int32(INT32_MIN - 1, ByteOrder.BIG)

    def test_wrong_type(self) -> None:
        """Test non-int values are rejected."""
        with pytest.raises(EncodeError, match="expected int"):
            encode_int32(1.0, ByteOrder.LITTLE)  # type: ignore[arg-type]

        with pytest.raises(EncodeError, match="expected int, got bool"):
            encode_int32(True, ByteOrder.LITTLE)

    def test_order_required(self) -> None:
        """Test a plain string is not accepted as a byte order."""
        with pytest.raises(TypeError, match="ByteOrder"):
            encode_int32(1, "little")  # type: ignore[arg-type]


class TestDecodeInt32:
    """Test decode_int32."""

    def test_one(self) -> None:
        assert decode_int32(b"\x01\x00\x00\x00", ByteOrder.LITTLE) == 1
        assert decode_int32(b"\x00\x00\x00\x01", ByteOrder.BIG) == 1

    def test_sign_from_top_byte_only(self) -> None:
        """Test intermediate high bytes don't leak a sign."""
        assert decode_int32(b"\x00\x80\x80\x80", ByteOrder.BIG) == 0x00808080
        assert decode_int32(b"\xff\xff\xff\x7f", ByteOrder.LITTLE) == INT32_MAX
        assert decode_int32(b"\x00\x00\x00\x80", ByteOrder.LITTLE) == INT32_MIN
        assert decode_int32(b"\xff\xff\xff\xff", ByteOrder.BIG) == -1

    def test_bytes_like_inputs(self) -> None:
        """Test bytearray and memoryview are accepted."""
        raw = b"\x00\x00\x01\x00"
        assert decode_int32(bytearray(raw), ByteOrder.BIG) == 256
        assert decode_int32(memoryview(raw), ByteOrder.BIG) == 256

    def test_short_input(self) -> None:
        """Test 3 bytes are rejected."""
        with pytest.raises(LengthError, match="expected 4 bytes, got 3") as exc_info:
            decode_int32(b"\x01\x02\x03", ByteOrder.LITTLE)

        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 3

    def test_long_input(self) -> None:
        """Test trailing bytes are not silently ignored."""
        with pytest.raises(LengthError):
            decode_int32(b"\x00" * 5, ByteOrder.BIG)

    def test_empty_input(self) -> None:
        with pytest.raises(LengthError, match="got 0"):
            decode_int32(b"", ByteOrder.BIG)

    def test_length_error_is_decode_error(self) -> None:
        with pytest.raises(DecodeError):
            decode_int32(b"\x00", ByteOrder.LITTLE)

    def test_non_bytes_rejected(self) -> None:
        """Test an int is not mistaken for a zero-filled buffer."""
        with pytest.raises(TypeError, match="bytes-like"):
            decode_int32(4, ByteOrder.LITTLE)  # type: ignore[arg-type]


class TestInt64:
    """Test encode_int64/decode_int64."""

    def test_minus_one(self) -> None:
        """Test -1 is all ones in both orders."""
        assert encode_int64(-1, ByteOrder.LITTLE) == b"\xff" * 8
        assert encode_int64(-1, ByteOrder.BIG) == b"\xff" * 8

    def test_byte_positions(self, sample_int64_bytes: bytes) -> None:
        """Test byte 0 holds bits [0:8) in little-endian order."""
        value = 0x0102030405060708
        assert encode_int64(value, ByteOrder.BIG) == sample_int64_bytes
        assert encode_int64(value, ByteOrder.LITTLE) == sample_int64_bytes[::-1]
        assert decode_int64(sample_int64_bytes, ByteOrder.BIG) == value

    def test_limits(self, order: ByteOrder) -> None:
        for value in (0, 1, -1, INT64_MAX, INT64_MIN):
            assert decode_int64(encode_int64(value, order), order) == value

    def test_min_layout(self) -> None:
        assert encode_int64(INT64_MIN, ByteOrder.LITTLE) == b"\x00" * 7 + b"\x80"

    def test_out_of_range(self) -> None:
        with pytest.raises(EncodeError):
            encode_int64(INT64_MAX + 1, ByteOrder.BIG)

        with pytest.raises(EncodeError):
            encode_int64(INT64_MIN - 1, ByteOrder.LITTLE)

    def test_wrong_length(self) -> None:
        with pytest.raises(LengthError, match="expected 8 bytes, got 4"):
            decode_int64(b"\x00" * 4, ByteOrder.LITTLE)

        with pytest.raises(LengthError, match="expected 8 bytes, got 9"):
            decode_int64(b"\x00" * 9, ByteOrder.BIG)

    def test_cross_order_is_reversal(self, sample_int64_bytes: bytes) -> None:
        little = decode_int64(sample_int64_bytes, ByteOrder.LITTLE)
        big = decode_int64(sample_int64_bytes[::-1], ByteOrder.BIG)
        assert little == big == 0x0807060504030201
