"""HTTP API for shifting uploaded subtitle files."""
