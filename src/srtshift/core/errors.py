"""Timing shift error hierarchy."""


class ShiftError(ValueError):
    """Base exception for failures while shifting a subtitle file."""


class MissingInputError(ShiftError):
    """Raised when no subtitle content was supplied."""


class InvalidParameterError(ShiftError):
    """Raised when an index or shift parameter cannot be interpreted."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name} {value!r}: {reason}")


class MalformedTimecodeError(ShiftError):
    """Raised when a timing line does not read 'HH:MM:SS,mmm --> HH:MM:SS,mmm'."""

    def __init__(self, line: str, line_number: int | None = None) -> None:
        self.line = line
        self.line_number = line_number
        where = f"Line {line_number}: " if line_number is not None else ""
        super().__init__(
            f"{where}Malformed timing line {line!r}, "
            "expected 'HH:MM:SS,mmm --> HH:MM:SS,mmm'"
        )


class OutOfRangeTimecodeError(ShiftError):
    """Raised when a shift would move a timecode before 00:00:00,000."""

    def __init__(
        self, timecode: str, shift_ms: int, line_number: int | None = None
    ) -> None:
        self.timecode = timecode
        self.shift_ms = shift_ms
        self.line_number = line_number
        where = f"Line {line_number}: " if line_number is not None else ""
        super().__init__(
            f"{where}Shifting {timecode} by {shift_ms} ms "
            "would produce a negative timecode"
        )
