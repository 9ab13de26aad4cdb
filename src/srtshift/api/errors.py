"""API error hierarchy."""

from srtshift.api.constants import ErrorCode


class ApiError(Exception):
    """Base API error with HTTP status code and structured detail."""

    def __init__(
        self,
        *,
        status_code: int,
        code: str,
        message: str,
        detail: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        self.detail = detail
        super().__init__(message)


class InvalidRequestError(ApiError):
    """Raised when the client sends an invalid request."""

    def __init__(
        self,
        message: str,
        *,
        code: str = ErrorCode.INVALID_REQUEST,
        detail: str | None = None,
    ) -> None:
        super().__init__(
            status_code=422,
            code=code,
            message=message,
            detail=detail,
        )


class MissingFileError(InvalidRequestError):
    """Raised when no subtitle file was uploaded."""

    def __init__(self) -> None:
        super().__init__("Please select an SRT file.", code=ErrorCode.MISSING_INPUT)
