"""Tagged numeric value model.

NumericValue pairs a raw Python number with the NumericKind it should be
encoded as, and validates at construction time that the number fits.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, ValidationInfo, field_validator

from ..codec.floats import bits_to_float32, float32_to_bits
from ..codec.ints import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN
from ..exceptions import EncodeError
from .kind import NumericKind

_INT_RANGES = {
    NumericKind.INT64: (INT64_MIN, INT64_MAX),
    NumericKind.INT32: (INT32_MIN, INT32_MAX),
}


class NumericValue(BaseModel):
    """An immutable number tagged with its fixed-width kind.

    Example:
        >>> NumericValue(kind=NumericKind.INT32, value=-7)
        NumericValue(kind=<NumericKind.INT32: 'int32'>, value=-7)
        >>> NumericValue(kind=NumericKind.INT32, value=2**31)
        Traceback (most recent call last):
        ...
        pydantic_core._pydantic_core.ValidationError: ...

    Attributes:
        kind: Fixed-width kind the value is encoded as
        value: int for integer kinds, float for float kinds (FLOAT32 values are
            rounded to single precision)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    kind: NumericKind
    value: StrictInt | StrictFloat

    @field_validator("value")
    @classmethod
    def check_fits_kind(cls, value: int | float, info: ValidationInfo) -> int | float:
        kind = info.data.get("kind")
        if kind is None:
            # kind failed validation; its own error is reported
            return value

        if kind.is_integer:
            if not isinstance(value, int):
                raise ValueError(f"{kind.value} requires an int, got {type(value).__name__}")
            min_value, max_value = _INT_RANGES[kind]
            if value < min_value or value > max_value:
                raise ValueError(
                    f"{value} doesn't fit in {kind.value} (range: {min_value} to {max_value})"
                )
            return value

        try:
            value = float(value)
        except OverflowError as err:
            raise ValueError(f"{kind.value}: value {value} too large") from err

        if kind is NumericKind.FLOAT32:
            try:
                bits = float32_to_bits(value)
            except EncodeError as err:
                raise ValueError(str(err)) from err
            # Store the single-precision value that will actually be encoded
            return bits_to_float32(bits)
        return value
