"""Shift SubRip subtitle timings by a fixed offset."""

__version__ = "0.1.0"
