"""SRT timecode parsing, formatting and shifting."""

import math
import re
from enum import StrEnum

from srtshift.core.errors import (
    InvalidParameterError,
    MalformedTimecodeError,
    OutOfRangeTimecodeError,
)

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

TIMECODE_PATTERN = r"[0-9]{2,}:[0-9]{2}:[0-9]{2},[0-9]{3}"

_TIMECODE_RE = re.compile(
    r"(?P<hours>[0-9]{2,}):(?P<minutes>[0-9]{2}):"
    r"(?P<seconds>[0-9]{2}),(?P<millis>[0-9]{3})"
)


class NegativeTimePolicy(StrEnum):
    """What to do when a shift moves a timecode before the start of the file."""

    REJECT = "reject"
    CLAMP = "clamp"


def parse_timecode(text: str) -> int:
    """Parse an 'HH:MM:SS,mmm' timecode into total milliseconds.

    Args:
        text: Timecode string, surrounding whitespace allowed

    Returns:
        Total milliseconds since the start of the file

    Raises:
        MalformedTimecodeError: If the text is not a timecode
    """
    match = _TIMECODE_RE.fullmatch(text.strip())
    if not match:
        raise MalformedTimecodeError(text)

    hours = int(match["hours"])
    minutes = int(match["minutes"])
    seconds = int(match["seconds"])
    millis = int(match["millis"])
    return (hours * 3600 + minutes * 60 + seconds) * MS_PER_SECOND + millis


def format_timecode(total_ms: int) -> str:
    """Render total milliseconds as a zero-padded 'HH:MM:SS,mmm' timecode.

    Hours are not wrapped at 24 and widen past two digits when needed.

    Raises:
        ValueError: If total_ms is negative
    """
    if total_ms < 0:
        raise ValueError(f"Cannot format negative duration {total_ms} ms")

    hours = total_ms // MS_PER_HOUR
    minutes = (total_ms % MS_PER_HOUR) // MS_PER_MINUTE
    seconds = (total_ms % MS_PER_MINUTE) // MS_PER_SECOND
    millis = total_ms % MS_PER_SECOND
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"


def seconds_to_millis(seconds: float) -> int:
    """Convert a signed shift in seconds to whole milliseconds.

    Rounds to the nearest millisecond so that e.g. 0.7 s is exactly 700 ms.

    Raises:
        InvalidParameterError: If seconds is NaN or infinite, or too large
            to express in milliseconds
    """
    if not math.isfinite(seconds):
        raise InvalidParameterError("shift_seconds", seconds, "must be finite")
    millis = seconds * MS_PER_SECOND
    if not math.isfinite(millis):
        raise InvalidParameterError("shift_seconds", seconds, "out of range")
    return round(millis)


def shift_timecode(
    text: str,
    shift_ms: int,
    policy: NegativeTimePolicy = NegativeTimePolicy.REJECT,
) -> str:
    """Shift a single timecode by a signed number of milliseconds.

    Args:
        text: Timecode in 'HH:MM:SS,mmm' form
        shift_ms: Signed offset in milliseconds
        policy: Handling of results that fall before 00:00:00,000

    Returns:
        The shifted timecode, always zero-padded

    Raises:
        MalformedTimecodeError: If text is not a timecode
        OutOfRangeTimecodeError: If the result is negative under REJECT
    """
    total_ms = parse_timecode(text) + shift_ms
    if total_ms < 0:
        if policy == NegativeTimePolicy.CLAMP:
            total_ms = 0
        else:
            raise OutOfRangeTimecodeError(text.strip(), shift_ms)
    return format_timecode(total_ms)
