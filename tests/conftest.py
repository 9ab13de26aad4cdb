"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from srtshift.utils.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch, tmp_path):
    """Isolate every test from the host environment and any .env file."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "SRTSHIFT_NEGATIVE_TIME_POLICY",
        "SRTSHIFT_NORMALIZE_LINE_ENDINGS",
        "SRTSHIFT_MAX_UPLOAD_BYTES",
        "SRTSHIFT_LOG_LEVEL",
        "SRTSHIFT_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def sample_srt_content() -> str:
    """Return sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello, this is a test.

2
00:00:05,000 --> 00:00:08,000
This is the second subtitle.

3
00:00:09,000 --> 00:00:12,000
And this is the third one.
"""


@pytest.fixture
def renumbered_srt_content() -> str:
    """SRT content whose index labels do not match their position."""
    return """10
00:00:01,000 --> 00:00:02,000
First

20
00:00:03,000 --> 00:00:04,000
Second
"""
