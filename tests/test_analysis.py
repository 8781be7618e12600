"""Tests for ptime.analysis."""

from __future__ import annotations

import random
from datetime import date

from ptime.analysis import build_histogram, find_latest, find_oldest
from ptime.models import DatedRecord


def _record(path: str, year: int, month: int = 1, day: int = 1) -> DatedRecord:
    return DatedRecord(rel_path=path, date=date(year, month, day))


def test_find_oldest_and_latest_empty() -> None:
    assert find_oldest([]) is None
    assert find_latest([]) is None


def test_find_oldest_single() -> None:
    record = _record("vacation/IMG_1.jpg", 2019, 7, 15)
    assert find_oldest([record]) is record
    assert find_latest([record]) is record


def test_find_oldest_and_latest_pick_extremes() -> None:
    records = [
        _record("b.jpg", 2021, 5, 5),
        _record("a.jpg", 2019, 3, 1),
        _record("c.jpg", 2023, 12, 31),
        _record("d.jpg", 2020, 1, 1),
    ]

    assert find_oldest(records).rel_path == "a.jpg"
    assert find_latest(records).rel_path == "c.jpg"


def test_ties_break_on_smallest_path_for_both_extremes() -> None:
    records = [_record("b.jpg", 2020), _record("a.jpg", 2020)]

    assert find_oldest(records) == _record("a.jpg", 2020)
    assert find_latest(records) == _record("a.jpg", 2020)


def test_latest_tie_break_ignores_input_order() -> None:
    records = [
        _record("z/late.jpg", 2024, 6, 1),
        _record("m/late.jpg", 2024, 6, 1),
        _record("a/early.jpg", 2001, 1, 1),
        _record("n/late.jpg", 2024, 6, 1),
    ]
    for _ in range(5):
        random.shuffle(records)
        assert find_latest(records).rel_path == "m/late.jpg"
        assert find_oldest(records).rel_path == "a/early.jpg"


def test_selection_does_not_mutate_input() -> None:
    records = [_record("b.jpg", 2021), _record("a.jpg", 2019)]
    snapshot = list(records)

    find_oldest(records)
    find_latest(records)
    build_histogram(records)

    assert records == snapshot


def test_build_histogram_empty() -> None:
    assert build_histogram([]) == {}


def test_build_histogram_single_year() -> None:
    assert build_histogram([_record("a.jpg", 2020), _record("b.jpg", 2020, 6)]) == {2020: 2}


def test_build_histogram_fills_gaps() -> None:
    records = [
        _record("a.jpg", 2019),
        _record("b.jpg", 2019, 8),
        _record("c.jpg", 2022),
    ]

    histogram = build_histogram(records)

    assert histogram == {2019: 2, 2020: 0, 2021: 0, 2022: 1}
    assert list(histogram) == [2019, 2020, 2021, 2022]


def test_build_histogram_keys_are_contiguous_and_counts_sum() -> None:
    rng = random.Random(1234)
    records = [
        _record(f"{index}.jpg", rng.randint(1990, 2025), rng.randint(1, 12), rng.randint(1, 28))
        for index in range(200)
    ]

    histogram = build_histogram(records)
    years = [record.date.year for record in records]

    assert list(histogram) == list(range(min(years), max(years) + 1))
    assert sum(histogram.values()) == len(records)
