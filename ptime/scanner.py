"""Directory traversal and JPEG candidate discovery."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from .errors import DirectoryReadError, NotADirectoryScanError, RootNotFoundError
from .logging import get_logger
from .models import CandidateFile

JPEG_SUFFIXES = frozenset({".jpg", ".jpeg"})

logger = get_logger("scanner")


@dataclass
class ExcludeRule:
    """A glob pattern from ``exclude_paths`` matched against relative paths."""

    pattern: str
    directory_only: bool
    anchored: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            return fnmatchcase(rel_path, self.pattern)

        for part in rel_path.split("/"):
            if fnmatchcase(part, self.pattern):
                return True
        return False


def build_exclude_rules(patterns: Iterable[str]) -> List[ExcludeRule]:
    rules: List[ExcludeRule] = []
    for raw in patterns:
        pattern = raw.strip()
        if not pattern:
            continue

        directory_only = pattern.endswith("/")
        if directory_only:
            pattern = pattern.rstrip("/")

        anchored = pattern.startswith("/")
        if anchored:
            pattern = pattern.lstrip("/")

        if pattern:
            rules.append(
                ExcludeRule(
                    pattern=pattern,
                    directory_only=directory_only,
                    anchored=anchored,
                    has_slash="/" in pattern,
                )
            )
    return rules


def _is_excluded(rel_path: str, is_dir: bool, rules: Sequence[ExcludeRule]) -> bool:
    return any(rule.matches(rel_path, is_dir) for rule in rules)


def is_jpeg(path: Path) -> bool:
    """Return True when the file extension is a JPEG spelling, ignoring case."""
    return path.suffix.lower() in JPEG_SUFFIXES


def canonicalize_root(root: str | Path) -> Path:
    """Resolve ``root`` to an absolute, symlink-free directory path."""
    try:
        root_path = Path(root).expanduser().resolve(strict=True)
    except FileNotFoundError as exc:
        raise RootNotFoundError(root) from exc
    except OSError as exc:
        raise DirectoryReadError(root, exc.strerror or str(exc)) from exc
    if not root_path.is_dir():
        raise NotADirectoryScanError(root)
    return root_path


def _raise_walk_error(exc: OSError) -> None:
    path = exc.filename if exc.filename is not None else "<unknown>"
    raise DirectoryReadError(path, exc.strerror or str(exc)) from exc


def _iter_files(root: Path, rules: Sequence[ExcludeRule]) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_raise_walk_error, followlinks=False
    ):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        if rules:
            dirnames[:] = [
                name
                for name in dirnames
                if not _is_excluded(f"{rel_dir}/{name}" if rel_dir else name, True, rules)
            ]

        for filename in filenames:
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if rules and _is_excluded(rel_path, False, rules):
                continue
            yield current_dir / filename


def scan_candidates(
    root: str | Path, *, exclude_paths: Iterable[str] = ()
) -> List[CandidateFile]:
    """Return every JPEG regular file under ``root``.

    Relative paths are computed once against the canonical root, so the result
    does not depend on how ``root`` was spelled or on the working directory.
    Unlistable directories abort the scan with :class:`DirectoryReadError`.
    """
    root_path = canonicalize_root(root)
    rules = build_exclude_rules(exclude_paths)

    candidates: List[CandidateFile] = []
    for path in _iter_files(root_path, rules):
        if not is_jpeg(path):
            continue
        # Symlinks and special files are not candidates.
        if path.is_symlink() or not path.is_file():
            continue
        candidates.append(
            CandidateFile(abs_path=path, rel_path=path.relative_to(root_path).as_posix())
        )

    logger.debug("Found %d JPEG candidates under %s", len(candidates), root_path)
    return candidates


class PhotoScanner:
    """Walks a directory tree to collect JPEG candidates."""

    def __init__(self, exclude_paths: Iterable[str] = ()) -> None:
        self.exclude_paths = list(exclude_paths)

    def scan(
        self, root: str | Path, *, exclude_paths: Iterable[str] = ()
    ) -> List[CandidateFile]:
        """Return candidates under ``root`` honouring both sets of exclusions."""
        patterns = [*self.exclude_paths, *exclude_paths]
        return scan_candidates(root, exclude_paths=patterns)


__all__ = [
    "ExcludeRule",
    "JPEG_SUFFIXES",
    "PhotoScanner",
    "build_exclude_rules",
    "canonicalize_root",
    "is_jpeg",
    "scan_candidates",
]
