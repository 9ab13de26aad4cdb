"""Constants and enums for the API layer."""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Error codes reported in API error bodies."""

    INVALID_REQUEST = "invalid_request"
    MISSING_INPUT = "missing_input"
    INVALID_PARAMETER = "invalid_parameter"
    MALFORMED_TIMECODE = "malformed_timecode"
    OUT_OF_RANGE_TIMECODE = "out_of_range_timecode"


SRT_MEDIA_TYPE = "application/x-subrip"
SRT_CHARSET = "utf-8"
MODIFIED_FILENAME_PREFIX = "modified_"
ALLOWED_UPLOAD_EXTENSIONS = {".srt"}
UPLOAD_CHUNK_BYTES = 64 * 1024
