"""Utility modules."""

from srtshift.utils.config import Settings, get_settings
from srtshift.utils.logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
]
