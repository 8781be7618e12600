"""Pipeline orchestration for the oldest/latest/hist commands."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from .analysis import build_histogram, find_latest, find_oldest
from .config import PtimeConfig, load_config
from .errors import UsageError
from .logging import get_logger
from .metadata import collect_records
from .models import DatedRecord
from .render import DEFAULT_WIDTH, MAX_WIDTH, render_histogram
from .scanner import PhotoScanner, canonicalize_root


def clamp_width(width: int) -> int:
    """Validate a histogram width, clamping values above the maximum."""
    if width < 1:
        raise UsageError(f"Width must be at least 1, got {width}")
    return min(width, MAX_WIDTH)


class Orchestrator:
    """Runs scanner, extractor, analyzer and renderer for one command."""

    def __init__(self, scanner: PhotoScanner | None = None) -> None:
        self.scanner = scanner or PhotoScanner()
        self.logger = get_logger("orchestrator")

    def collect(self, path: str | Path) -> Tuple[PtimeConfig, List[DatedRecord]]:
        """Scan ``path`` and return its config with every dated record found."""
        root = canonicalize_root(path)
        self.logger.debug("Scanning %s", root)
        config = load_config(root)

        candidates = self.scanner.scan(root, exclude_paths=config.exclude_paths)
        self.logger.debug("Scanner discovered %d candidates", len(candidates))

        records = collect_records(candidates)
        self.logger.debug(
            "Extracted capture dates for %d of %d candidates",
            len(records),
            len(candidates),
        )
        return config, records

    def run_oldest(self, path: str | Path) -> List[str]:
        _, records = self.collect(path)
        oldest = find_oldest(records)
        return [oldest.format()] if oldest is not None else []

    def run_latest(self, path: str | Path) -> List[str]:
        _, records = self.collect(path)
        latest = find_latest(records)
        return [latest.format()] if latest is not None else []

    def run_hist(self, path: str | Path, width: Optional[int] = None) -> List[str]:
        """Render the per-year histogram.

        ``width`` falls back to ``hist.width`` from .ptime.yml, then to the
        built-in default.
        """
        if width is not None:
            width = clamp_width(width)
        config, records = self.collect(path)
        if width is None:
            width = clamp_width(config.hist.width or DEFAULT_WIDTH)
        self.logger.debug("Rendering histogram at width %d", width)
        return render_histogram(build_histogram(records), width)


__all__ = ["Orchestrator", "clamp_width"]
