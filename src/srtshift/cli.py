"""Command-line front end for shifting SRT files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import structlog

from srtshift.core import (
    NegativeTimePolicy,
    ShiftError,
    parse_index,
    parse_shift,
    shift_subtitles,
)
from srtshift.utils.config import get_settings
from srtshift.utils.logging import setup_logging

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="srtshift",
        description="Shift timestamps in an .srt file by a fixed offset.",
    )
    parser.add_argument("srt", help="Path to .srt file")
    parser.add_argument(
        "-s",
        "--shift",
        required=True,
        help="Time shift in seconds (positive or negative)",
    )
    parser.add_argument(
        "--start",
        default=None,
        help="First subtitle number to shift (default: first subtitle)",
    )
    parser.add_argument(
        "--end",
        default=None,
        help="Last subtitle number to shift (default: last index in file)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output path (default: modified_<name> next to the input)",
    )
    output.add_argument(
        "--in-place",
        action="store_true",
        help="Overwrite the input file",
    )
    parser.add_argument(
        "--clamp",
        action="store_true",
        help="Clamp timecodes shifted before zero instead of failing",
    )
    return parser


def default_output_path(srt_path: Path) -> Path:
    """Return modified_<name> in the same directory as the input."""
    return srt_path.with_name(f"modified_{srt_path.name}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(sys.stderr)

    srt_path = Path(args.srt)
    if not srt_path.is_file():
        print(f"Error: File not found: {srt_path}", file=sys.stderr)
        return 1

    policy = NegativeTimePolicy.CLAMP if args.clamp else settings.negative_time_policy

    try:
        # newline="" keeps CR and CRLF endings visible to the shifter
        with srt_path.open(encoding="utf-8-sig", newline="") as f:
            content = f.read()
        result = shift_subtitles(
            content,
            parse_index(args.start, "start_index"),
            parse_index(args.end, "end_index"),
            parse_shift(args.shift),
            policy=policy,
            universal_newlines=settings.universal_newlines,
        )
    except (ShiftError, UnicodeDecodeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.in_place:
        target = srt_path
    else:
        target = args.output or default_output_path(srt_path)

    # Write to temp file first, then replace
    tmp_path = target.with_suffix(".tmp.srt")
    try:
        with tmp_path.open("w", encoding="utf-8", newline="") as f:
            f.write(result.content)
        tmp_path.replace(target)
    except OSError as e:
        print(f"Error: Could not write {target}: {e}", file=sys.stderr)
        return 1
    finally:
        tmp_path.unlink(missing_ok=True)

    logger.debug("output_written", path=str(target))
    print(result.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
