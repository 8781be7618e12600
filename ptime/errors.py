"""Error taxonomy for ptime runs.

Each error carries the process exit code the CLI reports for it.
"""

from __future__ import annotations

from pathlib import Path

EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_IO = 3


class PtimeError(RuntimeError):
    """Base class for failures surfaced to the user."""

    exit_code = EXIT_FAILURE


class UsageError(PtimeError):
    """Raised for malformed or out-of-range command parameters."""

    exit_code = EXIT_USAGE


class ConfigError(PtimeError):
    """Raised when the configuration file cannot be parsed."""

    exit_code = EXIT_USAGE


class ScanError(PtimeError):
    """Filesystem failure that aborts a scan."""

    exit_code = EXIT_IO

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(message)
        self.path = Path(path)


class RootNotFoundError(ScanError):
    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Directory not found: {path}", path)


class NotADirectoryScanError(ScanError):
    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Not a directory: {path}", path)


class DirectoryReadError(ScanError):
    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Failed to read directory {path}: {reason}", path)


class FileReadError(ScanError):
    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Failed to read file {path}: {reason}", path)


class MetadataError(PtimeError):
    """Raised by the metadata decoder; always recovered by skipping the file."""


__all__ = [
    "ConfigError",
    "DirectoryReadError",
    "EXIT_FAILURE",
    "EXIT_IO",
    "EXIT_USAGE",
    "FileReadError",
    "MetadataError",
    "NotADirectoryScanError",
    "PtimeError",
    "RootNotFoundError",
    "ScanError",
    "UsageError",
]
