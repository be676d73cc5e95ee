"""Exception hierarchy for bytecodec.

All exceptions inherit from ByteCodecError for easy catching of any
bytecodec-specific error.
"""

from __future__ import annotations


class ByteCodecError(Exception):
    """Base exception for all bytecodec errors."""

    pass


class EncodeError(ByteCodecError):
    """Raised when a value cannot be encoded.

    Examples:
        - Value is not an int (or float) as the operation requires
        - Integer outside the signed range of the target width
        - Finite float too large for single precision
    """

    pass


class DecodeError(ByteCodecError):
    """Raised when decoding binary data fails."""

    pass


class LengthError(DecodeError):
    """Raised when a byte sequence does not match the expected width.

    Attributes:
        expected: Required number of bytes (4 or 8)
        actual: Number of bytes received
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} bytes, got {actual}")
