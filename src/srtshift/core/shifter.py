"""Shift SRT timing lines by a fixed offset within a range of subtitles."""

from dataclasses import dataclass

import structlog

from srtshift.core.errors import MissingInputError, OutOfRangeTimecodeError
from srtshift.core.lines import TimingLine, classify_line, is_index_line
from srtshift.core.params import format_seconds
from srtshift.core.timecode import (
    NegativeTimePolicy,
    seconds_to_millis,
    shift_timecode,
)
from srtshift.formats.srt import (
    join_terminated_lines,
    split_lines,
    split_terminated_lines,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class ShiftResult:
    """Outcome of shifting a subtitle file."""

    content: str
    start_index: int
    end_index: int
    shift_seconds: float
    shifted_count: int

    @property
    def message(self) -> str:
        """Human-readable summary of the applied shift."""
        return format_status_message(
            self.start_index, self.end_index, self.shift_seconds
        )


def format_status_message(start_index: int, end_index: int, shift: float) -> str:
    """Build the status message reported after a successful shift."""
    return (
        f"Subtitles from index {start_index} to {end_index} "
        f"have been shifted by {format_seconds(shift)} seconds."
    )


def last_subtitle_index(content: str) -> int:
    """Return the label of the last index line in the content.

    This is the literal number written on the final index line, not a count
    of index lines. The two agree for sequentially numbered files only.

    Returns:
        The last index label, or 0 if the content has no index lines
    """
    last = 0
    for line in split_lines(content, universal_newlines=True):
        if is_index_line(line):
            last = int(line.strip())
    return last


def _shift_timing_line(
    timing: TimingLine,
    shift_ms: int,
    policy: NegativeTimePolicy,
    line_number: int,
) -> str:
    try:
        start = shift_timecode(timing.start, shift_ms, policy)
        end = shift_timecode(timing.end, shift_ms, policy)
    except OutOfRangeTimecodeError as e:
        raise OutOfRangeTimecodeError(e.timecode, shift_ms, line_number) from e
    return timing.render(start, end)


def _process_line(
    count: int,
    line: str,
    line_number: int,
    start_index: int,
    end_index: int,
    shift_ms: int,
    policy: NegativeTimePolicy,
) -> tuple[int, str | None]:
    """Advance the subtitle count over one line.

    Returns:
        The updated count and the rewritten line, or None if the line passes
        through unchanged
    """
    if is_index_line(line):
        return count + 1, None
    if not start_index <= count <= end_index:
        return count, None

    classified = classify_line(line, line_number)
    if not isinstance(classified, TimingLine):
        return count, None
    return count, _shift_timing_line(classified, shift_ms, policy, line_number)


def _shift_lines(
    lines: list[str],
    start_index: int,
    end_index: int,
    shift_ms: int,
    policy: NegativeTimePolicy,
) -> tuple[list[str], int]:
    """Shift in-range timing lines, returning new lines and how many changed."""
    count = 0
    shifted = 0
    output = []
    for line_number, line in enumerate(lines, start=1):
        count, rewritten = _process_line(
            count, line, line_number, start_index, end_index, shift_ms, policy
        )
        if rewritten is None:
            output.append(line)
        else:
            output.append(rewritten)
            shifted += 1
    return output, shifted


def _shift_content(
    content: str,
    start_index: int,
    end_index: int,
    shift_seconds: float,
    policy: NegativeTimePolicy,
    universal_newlines: bool,
) -> tuple[str, int]:
    shift_ms = seconds_to_millis(shift_seconds)

    pairs = split_terminated_lines(content, universal_newlines=universal_newlines)
    lines, shifted = _shift_lines(
        [text for text, _ in pairs], start_index, end_index, shift_ms, policy
    )
    result = join_terminated_lines(
        zip(lines, [terminator for _, terminator in pairs], strict=True)
    )
    return result, shifted


def shift_timings(
    content: str,
    start_index: int,
    end_index: int | None = None,
    shift_seconds: float = 0.0,
    *,
    policy: NegativeTimePolicy = NegativeTimePolicy.REJECT,
    universal_newlines: bool = True,
) -> str:
    """Shift every timing line whose subtitle number is in [start, end].

    The subtitle number is a running count of index lines seen so far, not
    the label written on them.

    Args:
        content: Raw SRT text
        start_index: First subtitle number to shift (inclusive)
        end_index: Last subtitle number to shift (inclusive). Defaults to
            last_subtitle_index(content)
        shift_seconds: Signed offset in seconds
        policy: Handling of timecodes shifted before 00:00:00,000
        universal_newlines: Recognise CRLF and lone CR as line terminators
            as well as LF. Every line keeps its own terminator either way.

    Returns:
        The content with in-range timing lines rewritten; all other lines are
        passed through unchanged

    Raises:
        MalformedTimecodeError: If an in-range line has ' --> ' but is not a
            valid timing line
        OutOfRangeTimecodeError: If a shifted timecode is negative under the
            REJECT policy
        InvalidParameterError: If shift_seconds is not finite
    """
    if end_index is None:
        end_index = last_subtitle_index(content)
    result, _ = _shift_content(
        content, start_index, end_index, shift_seconds, policy, universal_newlines
    )
    return result


def shift_subtitles(
    content: str,
    start_index: int | None = None,
    end_index: int | None = None,
    shift_seconds: float = 0.0,
    *,
    policy: NegativeTimePolicy = NegativeTimePolicy.REJECT,
    universal_newlines: bool = True,
) -> ShiftResult:
    """Shift a subtitle file and report the effective range.

    A missing start index means "from the first subtitle" and a missing end
    index is auto-detected from the last index line.

    Raises:
        MissingInputError: If content is empty
        ShiftError: Any error raised by shift_timings()
    """
    if not content:
        raise MissingInputError("Subtitle content cannot be empty")

    start = start_index if start_index is not None else 0
    end = end_index if end_index is not None else last_subtitle_index(content)

    result, shifted = _shift_content(
        content, start, end, shift_seconds, policy, universal_newlines
    )
    logger.info(
        "shift_applied",
        start_index=start,
        end_index=end,
        shift_seconds=shift_seconds,
        shifted_lines=shifted,
    )
    return ShiftResult(
        content=result,
        start_index=start,
        end_index=end,
        shift_seconds=shift_seconds,
        shifted_count=shifted,
    )
