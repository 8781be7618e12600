from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.photo_builder import PhotoBuilder


@pytest.fixture
def photo_builder(tmp_path: Path) -> PhotoBuilder:
    """Provide a photo library builder rooted at the pytest tmp_path."""
    return PhotoBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_ptime_logger() -> Iterator[None]:
    """Drop handlers installed by CLI runs so they never outlive a test."""
    yield
    logger = logging.getLogger("ptime")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
