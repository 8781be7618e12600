"""Oldest/latest selection and per-year aggregation over dated records."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Optional, Sequence

from .models import DatedRecord


def find_oldest(records: Sequence[DatedRecord]) -> Optional[DatedRecord]:
    """Return the record with the earliest date; ties go to the smallest path."""
    if not records:
        return None
    return min(records, key=lambda record: (record.date, record.rel_path))


def find_latest(records: Sequence[DatedRecord]) -> Optional[DatedRecord]:
    """Return the record with the latest date; ties go to the smallest path.

    The tie-break is the same as :func:`find_oldest` so that repeated runs
    over the same tree always name the same file.
    """
    if not records:
        return None
    latest = max(record.date for record in records)
    return min(
        (record for record in records if record.date == latest),
        key=lambda record: record.rel_path,
    )


def build_histogram(records: Sequence[DatedRecord]) -> Dict[int, int]:
    """Count records per year, filling every year between min and max.

    Keys are inserted in ascending order. Empty input gives an empty dict.
    """
    if not records:
        return {}

    counts = Counter(record.date.year for record in records)
    first, last = min(counts), max(counts)
    return {year: counts.get(year, 0) for year in range(first, last + 1)}


__all__ = ["build_histogram", "find_latest", "find_oldest"]
