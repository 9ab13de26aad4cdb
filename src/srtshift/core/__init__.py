"""Core timing shift logic."""

from srtshift.core.errors import (
    InvalidParameterError,
    MalformedTimecodeError,
    MissingInputError,
    OutOfRangeTimecodeError,
    ShiftError,
)
from srtshift.core.lines import (
    IndexLine,
    OtherLine,
    TimingLine,
    classify_line,
    is_index_line,
)
from srtshift.core.params import format_seconds, parse_index, parse_shift
from srtshift.core.shifter import (
    ShiftResult,
    format_status_message,
    last_subtitle_index,
    shift_subtitles,
    shift_timings,
)
from srtshift.core.timecode import (
    NegativeTimePolicy,
    format_timecode,
    parse_timecode,
    seconds_to_millis,
    shift_timecode,
)

__all__ = [
    "IndexLine",
    "InvalidParameterError",
    "MalformedTimecodeError",
    "MissingInputError",
    "NegativeTimePolicy",
    "OtherLine",
    "OutOfRangeTimecodeError",
    "ShiftError",
    "ShiftResult",
    "TimingLine",
    "classify_line",
    "format_seconds",
    "format_status_message",
    "format_timecode",
    "is_index_line",
    "last_subtitle_index",
    "parse_index",
    "parse_shift",
    "parse_timecode",
    "seconds_to_millis",
    "shift_subtitles",
    "shift_timecode",
    "shift_timings",
]
