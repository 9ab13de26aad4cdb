"""API route definitions."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated
from urllib.parse import quote

import structlog
from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import Response

from srtshift.api.constants import (
    ALLOWED_UPLOAD_EXTENSIONS,
    SRT_CHARSET,
    SRT_MEDIA_TYPE,
    UPLOAD_CHUNK_BYTES,
)
from srtshift.api.errors import InvalidRequestError, MissingFileError
from srtshift.api.schemas import ErrorDetail, ShiftResponse
from srtshift.api.service import (
    SubtitleUpload,
    decode_upload,
    encode_download,
    run_shift,
)
from srtshift.core import ShiftResult
from srtshift.utils.config import Settings, get_settings

router = APIRouter(prefix="/api")
logger = structlog.get_logger()

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {422: {"model": ErrorDetail}}

SettingsDep = Annotated[Settings, Depends(get_settings)]
UploadField = Annotated[UploadFile | None, File()]
OptionalField = Annotated[str | None, Form()]


async def _read_upload(file: UploadFile | None, max_size: int) -> SubtitleUpload:
    """Validate and decode an uploaded subtitle file."""
    if file is None or not file.filename:
        raise MissingFileError()

    filename = file.filename
    suffix = Path(filename).suffix.lower()
    if suffix not in ALLOWED_UPLOAD_EXTENSIONS:
        raise InvalidRequestError(
            f"Unsupported file type: {suffix or filename}",
            detail=f"Allowed: {', '.join(sorted(ALLOWED_UPLOAD_EXTENSIONS))}",
        )

    chunks: list[bytes] = []
    bytes_read = 0
    while chunk := await file.read(UPLOAD_CHUNK_BYTES):
        bytes_read += len(chunk)
        if bytes_read > max_size:
            raise InvalidRequestError(
                "File too large",
                detail=f"Maximum file size is {max_size} bytes",
            )
        chunks.append(chunk)

    return decode_upload(filename, b"".join(chunks))


def _content_disposition(filename: str) -> str:
    """Build an attachment Content-Disposition header, RFC 5987 aware."""
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


async def _shift_upload(
    file: UploadFile | None,
    start_index: str | None,
    end_index: str | None,
    shift_seconds: str | None,
    settings: Settings,
) -> tuple[SubtitleUpload, ShiftResult]:
    upload = await _read_upload(file, settings.max_upload_bytes)
    result = run_shift(
        upload,
        settings,
        start_index=start_index,
        end_index=end_index,
        shift_seconds=shift_seconds,
    )
    return upload, result


@router.post("/shift", response_model=ShiftResponse, responses=_ERROR_RESPONSES)
async def shift_file(
    settings: SettingsDep,
    file: UploadField = None,
    start_index: OptionalField = None,
    end_index: OptionalField = None,
    shift_seconds: OptionalField = None,
) -> ShiftResponse:
    """Shift the timings of an uploaded SRT file and return the result."""
    upload, result = await _shift_upload(
        file, start_index, end_index, shift_seconds, settings
    )
    return ShiftResponse(
        filename=upload.modified_filename,
        start_index=result.start_index,
        end_index=result.end_index,
        shift_seconds=result.shift_seconds,
        shifted_count=result.shifted_count,
        message=result.message,
        content=result.content,
    )


@router.post("/shift/download", responses=_ERROR_RESPONSES)
async def shift_file_download(
    settings: SettingsDep,
    file: UploadField = None,
    start_index: OptionalField = None,
    end_index: OptionalField = None,
    shift_seconds: OptionalField = None,
) -> Response:
    """Shift an uploaded SRT file and return it as 'modified_<name>'."""
    upload, result = await _shift_upload(
        file, start_index, end_index, shift_seconds, settings
    )
    logger.info("download_ready", filename=upload.modified_filename)
    return Response(
        content=encode_download(upload, result.content),
        media_type=f"{SRT_MEDIA_TYPE}; charset={SRT_CHARSET}",
        headers={
            "Content-Disposition": _content_disposition(upload.modified_filename),
            "X-Shift-Message": result.message,
        },
    )


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}
