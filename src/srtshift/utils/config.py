"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from srtshift.core.timecode import NegativeTimePolicy


class Settings(BaseSettings):
    """Application settings loaded from SRTSHIFT_* environment variables.

    Attributes:
        negative_time_policy: "reject" to fail on timecodes shifted before
            zero, "clamp" to pin them at 00:00:00,000
        universal_newlines: Treat CRLF and lone CR as line terminators too;
            each line keeps its own terminator on output
        max_upload_bytes: Largest accepted subtitle upload
        log_level: Minimum log level name
        log_json: Render logs as JSON lines instead of console output
    """

    negative_time_policy: NegativeTimePolicy = NegativeTimePolicy.REJECT
    universal_newlines: bool = True

    max_upload_bytes: int = 5 * 1024 * 1024

    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="SRTSHIFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings instance loaded from environment

    Note:
        Settings are cached for performance. Use get_settings.cache_clear()
        to reload settings in tests.
    """
    return Settings()
