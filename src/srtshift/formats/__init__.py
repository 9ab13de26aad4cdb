"""Subtitle format handlers."""

from srtshift.formats.srt import (
    join_terminated_lines,
    split_lines,
    split_terminated_lines,
)

__all__ = [
    "join_terminated_lines",
    "split_lines",
    "split_terminated_lines",
]
