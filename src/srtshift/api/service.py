"""Bridges uploaded subtitle files to the core timing shifter."""

from __future__ import annotations

import codecs
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from srtshift.api.constants import MODIFIED_FILENAME_PREFIX, ErrorCode
from srtshift.api.errors import InvalidRequestError
from srtshift.core import (
    InvalidParameterError,
    MalformedTimecodeError,
    MissingInputError,
    OutOfRangeTimecodeError,
    ShiftError,
    ShiftResult,
    parse_index,
    parse_shift,
    shift_subtitles,
)

if TYPE_CHECKING:
    from srtshift.utils.config import Settings

logger = structlog.get_logger()

# Maps core errors to (error_code, user_message) for InvalidRequestError
_ERROR_MAP: dict[type, tuple[str, str]] = {
    MissingInputError: (ErrorCode.MISSING_INPUT, "Please select an SRT file."),
    InvalidParameterError: (ErrorCode.INVALID_PARAMETER, "Invalid parameter"),
    MalformedTimecodeError: (ErrorCode.MALFORMED_TIMECODE, "Malformed timing line"),
    OutOfRangeTimecodeError: (
        ErrorCode.OUT_OF_RANGE_TIMECODE,
        "Shift would move subtitles before the start of the file",
    ),
}


@dataclass(frozen=True)
class SubtitleUpload:
    """A decoded subtitle upload."""

    filename: str
    content: str
    has_bom: bool = False

    @property
    def modified_filename(self) -> str:
        return f"{MODIFIED_FILENAME_PREFIX}{self.filename}"


def decode_upload(filename: str, data: bytes) -> SubtitleUpload:
    """Decode raw upload bytes as UTF-8, remembering a leading BOM.

    Raises:
        InvalidRequestError: If the payload is not valid UTF-8
    """
    has_bom = data.startswith(codecs.BOM_UTF8)
    try:
        content = data.decode("utf-8-sig")
    except UnicodeDecodeError as err:
        raise InvalidRequestError(
            "Subtitle file must be UTF-8 encoded text",
            detail=str(err),
        ) from err
    return SubtitleUpload(
        filename=Path(filename).name, content=content, has_bom=has_bom
    )


def encode_download(upload: SubtitleUpload, content: str) -> bytes:
    """Encode shifted content for download, restoring the original BOM."""
    data = content.encode("utf-8")
    if upload.has_bom:
        return codecs.BOM_UTF8 + data
    return data


def to_api_error(exc: Exception) -> InvalidRequestError:
    """Convert a core shift exception to InvalidRequestError."""
    for exc_type, (code, message) in _ERROR_MAP.items():
        if isinstance(exc, exc_type):
            return InvalidRequestError(message, code=code, detail=str(exc))
    return InvalidRequestError("Unexpected shift error", detail=str(exc))


def run_shift(
    upload: SubtitleUpload,
    settings: Settings,
    *,
    start_index: str | int | None,
    end_index: str | int | None,
    shift_seconds: str | float | None,
) -> ShiftResult:
    """Parse raw parameters and shift an uploaded file.

    Raises:
        InvalidRequestError: If parameters or file content are rejected
    """
    log = logger.bind(filename=upload.filename)
    t0 = time.monotonic()
    try:
        result = shift_subtitles(
            upload.content,
            parse_index(start_index, "start_index"),
            parse_index(end_index, "end_index"),
            parse_shift(shift_seconds),
            policy=settings.negative_time_policy,
            universal_newlines=settings.universal_newlines,
        )
    except ShiftError as exc:
        log.warning("shift_rejected", error=str(exc))
        raise to_api_error(exc) from exc

    log.info(
        "step_done",
        step="shift",
        shifted_lines=result.shifted_count,
        duration_ms=int((time.monotonic() - t0) * 1000),
    )
    return result
