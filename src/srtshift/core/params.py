"""Parsing of user-supplied index and shift parameters."""

import math

from srtshift.core.errors import InvalidParameterError
from srtshift.core.timecode import MS_PER_SECOND


def parse_index(value: str | int | None, name: str = "index") -> int | None:
    """Parse an optional subtitle index.

    Args:
        value: Raw value; None or a blank string mean "not supplied"
        name: Parameter name used in error messages

    Returns:
        The integer index, or None when not supplied

    Raises:
        InvalidParameterError: If the value is not an integer
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidParameterError(name, value, "must be an integer")
    if isinstance(value, int):
        return value

    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError as e:
        raise InvalidParameterError(name, value, "must be an integer") from e


def parse_shift(value: str | float | None) -> float:
    """Parse a signed time shift in seconds.

    Raises:
        InvalidParameterError: If the value is missing, not a number, not
            finite, or too large to express in milliseconds
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidParameterError("shift_seconds", value, "is required")
    if isinstance(value, bool):
        raise InvalidParameterError("shift_seconds", value, "must be a number")

    try:
        seconds = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError("shift_seconds", value, "must be a number") from e

    if not math.isfinite(seconds):
        raise InvalidParameterError("shift_seconds", value, "must be finite")
    if not math.isfinite(seconds * MS_PER_SECOND):
        raise InvalidParameterError("shift_seconds", value, "out of range")
    return seconds


def format_seconds(seconds: float) -> str:
    """Render a shift for display at millisecond precision.

    Trailing zeros and a bare decimal point are dropped, so 5.0 reads '5'
    and 0.7 reads '0.7'. Never uses exponent notation.
    """
    text = f"{seconds:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
