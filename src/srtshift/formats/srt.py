"""SRT line splitting that keeps each line's own terminator."""

import re
from collections.abc import Iterable

_LF_RE = re.compile(r"(\n)")
_UNIVERSAL_NEWLINE_RE = re.compile(r"(\r\n|\r|\n)")


def split_terminated_lines(
    content: str, *, universal_newlines: bool = True
) -> list[tuple[str, str]]:
    """Split SRT content into (text, terminator) pairs.

    Args:
        content: Raw SRT text
        universal_newlines: Treat CRLF and lone CR as terminators as well as
            LF. When False only LF ends a line and a CR stays in the text.

    Returns:
        Ordered pairs. The last pair always has an empty terminator, so a
        trailing newline yields a trailing ('', '') pair and
        join_terminated_lines() restores the input exactly, even when the
        file mixes line endings.
    """
    pattern = _UNIVERSAL_NEWLINE_RE if universal_newlines else _LF_RE
    parts = pattern.split(content)
    return list(zip(parts[::2], [*parts[1::2], ""], strict=True))


def join_terminated_lines(lines: Iterable[tuple[str, str]]) -> str:
    """Join (text, terminator) pairs back into SRT text."""
    return "".join(text + terminator for text, terminator in lines)


def split_lines(content: str, *, universal_newlines: bool = False) -> list[str]:
    """Split SRT content into lines without their terminators.

    By default this splits on '\\n' only, as the timing pass does with
    universal newlines switched off.
    """
    return [
        text
        for text, _ in split_terminated_lines(
            content, universal_newlines=universal_newlines
        )
    ]
