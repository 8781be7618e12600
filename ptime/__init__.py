"""Report the oldest, latest and per-year distribution of JPEG photos."""

__version__ = "0.1.0"
