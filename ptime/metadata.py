"""Capture-date extraction from embedded JPEG metadata."""

from __future__ import annotations

import struct
from datetime import date
from pathlib import Path
from typing import Any, BinaryIO, Callable, Iterable, List, Optional, Tuple

import piexif

from .errors import FileReadError, MetadataError
from .logging import get_logger
from .models import CandidateFile, DatedRecord, RawTimestamps

logger = get_logger("metadata")

_JPEG_SOI = b"\xff\xd8"

# Fields are tried in this order; the first one that parses wins.
FALLBACK_FIELDS: Tuple[Tuple[str, Callable[[RawTimestamps], Optional[str]]], ...] = (
    ("DateTimeOriginal", lambda raw: raw.original),
    ("DateTimeDigitized", lambda raw: raw.digitized),
    ("DateTime", lambda raw: raw.modified),
)

_DATE_SEPARATORS = (":", "-")


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("ascii", errors="ignore")
    if isinstance(value, str):
        return value
    return None


def read_raw_timestamps(source: BinaryIO) -> RawTimestamps:
    """Decode the three capture-time fields from a JPEG byte stream.

    Only the EXIF segment is parsed; pixel data and image dimensions are never
    inspected. Raises :class:`MetadataError` when the container or its EXIF
    block cannot be decoded. Missing fields are returned as ``None``.
    Read errors from ``source`` propagate unchanged.
    """
    data = source.read()
    if data[:2] != _JPEG_SOI:
        raise MetadataError("Not a JPEG stream")
    try:
        exif_dict = piexif.load(data)
    except (ValueError, IndexError, KeyError, struct.error) as exc:
        raise MetadataError(f"Unable to decode metadata: {exc}") from exc

    zeroth = exif_dict.get("0th") or {}
    exif_ifd = exif_dict.get("Exif") or {}
    return RawTimestamps(
        original=_as_text(exif_ifd.get(piexif.ExifIFD.DateTimeOriginal)),
        digitized=_as_text(exif_ifd.get(piexif.ExifIFD.DateTimeDigitized)),
        modified=_as_text(zeroth.get(piexif.ImageIFD.DateTime)),
    )


def parse_exif_date(value: Optional[str]) -> Optional[date]:
    """Return the calendar date of an EXIF timestamp, or None if unusable.

    EXIF stores ``YYYY:MM:DD HH:MM:SS``; some writers use hyphens or omit the
    time. Time-of-day and any timezone suffix are discarded.
    """
    if not value:
        return None
    text = value.strip("\x00").strip()
    if not text:
        return None

    date_part = text.split()[0]
    for separator in _DATE_SEPARATORS:
        components = date_part.split(separator)
        if len(components) != 3 or not all(
            part.isascii() and part.isdigit() for part in components
        ):
            continue
        year, month, day = (int(part) for part in components)
        try:
            return date(year, month, day)
        except ValueError:
            continue
    return None


def select_capture_date(raw: RawTimestamps) -> Optional[date]:
    """Apply the fallback order to decoded fields."""
    for name, accessor in FALLBACK_FIELDS:
        parsed = parse_exif_date(accessor(raw))
        if parsed is not None:
            logger.debug("Capture date taken from %s", name)
            return parsed
    return None


def read_capture_date(path: Path) -> Optional[date]:
    """Open ``path`` once and return its capture date, if any.

    Filesystem failures raise :class:`FileReadError`; undecodable metadata is
    treated the same as a file with no timestamp.
    """
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise FileReadError(path, exc.strerror or str(exc)) from exc

    with handle:
        try:
            raw = read_raw_timestamps(handle)
        except MetadataError as exc:
            logger.debug("Skipping %s: %s", path, exc)
            return None
        except OSError as exc:
            raise FileReadError(path, exc.strerror or str(exc)) from exc
    return select_capture_date(raw)


def collect_records(candidates: Iterable[CandidateFile]) -> List[DatedRecord]:
    """Return a dated record for every candidate with a usable timestamp."""
    records: List[DatedRecord] = []
    for candidate in candidates:
        captured = read_capture_date(candidate.abs_path)
        if captured is None:
            logger.debug("No capture date for %s", candidate.rel_path)
            continue
        records.append(DatedRecord(rel_path=candidate.rel_path, date=captured))
    return records


__all__ = [
    "FALLBACK_FIELDS",
    "collect_records",
    "parse_exif_date",
    "read_capture_date",
    "read_raw_timestamps",
    "select_capture_date",
]
