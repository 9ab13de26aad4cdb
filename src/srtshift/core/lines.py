"""Classification of SRT lines into index, timing and other lines."""

import re
from dataclasses import dataclass

from srtshift.core.errors import MalformedTimecodeError
from srtshift.core.timecode import TIMECODE_PATTERN

TIMING_SEPARATOR = " --> "

_INDEX_RE = re.compile(r"[0-9]+")
_TIMING_RE = re.compile(
    rf"(?P<indent>\s*)(?P<start>{TIMECODE_PATTERN})"
    rf"{re.escape(TIMING_SEPARATOR)}"
    rf"(?P<end>{TIMECODE_PATTERN})(?P<tail>(?:\s.*)?)",
    re.DOTALL,
)


@dataclass(frozen=True)
class IndexLine:
    """A line holding only a subtitle index label."""

    label: int
    text: str


@dataclass(frozen=True)
class TimingLine:
    """A line holding a 'start --> end' timecode pair.

    indent and tail keep whatever surrounded the timecodes so that the line
    can be rebuilt byte for byte.
    """

    start: str
    end: str
    text: str
    indent: str = ""
    tail: str = ""

    def render(self, start: str, end: str) -> str:
        """Rebuild the line with new start/end timecodes."""
        return f"{self.indent}{start}{TIMING_SEPARATOR}{end}{self.tail}"


@dataclass(frozen=True)
class OtherLine:
    """Subtitle text, blank separators and anything else passed through."""

    text: str


Line = IndexLine | TimingLine | OtherLine


def is_index_line(line: str) -> bool:
    """Return True if the trimmed line is one or more decimal digits."""
    return _INDEX_RE.fullmatch(line.strip()) is not None


def classify_line(line: str, line_number: int | None = None) -> Line:
    """Classify a single raw line.

    Args:
        line: Raw line without its line terminator
        line_number: 1-based position, used only for error reporting

    Returns:
        IndexLine, TimingLine or OtherLine

    Raises:
        MalformedTimecodeError: If the line carries the ' --> ' separator but
            is not a valid timing line
    """
    if is_index_line(line):
        return IndexLine(label=int(line.strip()), text=line)

    if TIMING_SEPARATOR not in line:
        return OtherLine(text=line)

    match = _TIMING_RE.fullmatch(line)
    if not match:
        raise MalformedTimecodeError(line, line_number)

    return TimingLine(
        start=match["start"],
        end=match["end"],
        text=line,
        indent=match["indent"],
        tail=match["tail"],
    )
