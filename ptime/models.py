"""Core data models shared across ptime components."""

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class CandidateFile:
    """A JPEG discovered under the scan root."""

    abs_path: Path
    rel_path: str


@dataclass(frozen=True)
class DatedRecord:
    """A candidate whose capture date could be extracted."""

    rel_path: str
    date: date

    def format(self) -> str:
        return f"{self.rel_path} {self.date.isoformat()}"


@dataclass(frozen=True)
class RawTimestamps:
    """Raw capture-time strings read from a file's embedded metadata."""

    original: Optional[str] = None
    digitized: Optional[str] = None
    modified: Optional[str] = None
