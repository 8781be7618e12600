"""ASCII bar rendering for per-year histograms."""

from __future__ import annotations

from typing import List, Mapping

BAR_CHAR = "█"  # full block

DEFAULT_WIDTH = 50
MAX_WIDTH = 200


def bar_length(count: int, max_count: int, width: int) -> int:
    """Scale ``count`` against ``max_count`` onto ``width`` units.

    Rounds half up, and never returns 0 for a non-zero count.
    """
    if count <= 0 or max_count <= 0:
        return 0
    # Integer arithmetic keeps .5 cases exact.
    scaled = (2 * count * width + max_count) // (2 * max_count)
    return max(scaled, 1)


def render_histogram(year_counts: Mapping[int, int], width: int) -> List[str]:
    """Return one ``YEAR BAR COUNT`` line per entry, in ascending year order."""
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")
    if not year_counts:
        return []

    max_count = max(year_counts.values())
    lines: List[str] = []
    for year in sorted(year_counts):
        count = year_counts[year]
        bar = BAR_CHAR * bar_length(count, max_count, width)
        lines.append(f"{year} {bar} {count}")
    return lines


__all__ = ["BAR_CHAR", "DEFAULT_WIDTH", "MAX_WIDTH", "bar_length", "render_histogram"]
