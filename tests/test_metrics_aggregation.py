"""Tests for the grouped aggregation engine, rankings and named views."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from bookstats.datahub.records import BookRecord
from bookstats.metrics.aggregation import (
    AggregateRow,
    PartialAggregate,
    aggregate,
    finalize,
    merge_partials,
    partial_aggregate,
    top,
)
from bookstats.metrics.views import (
    author_stats,
    language_counts,
    most_rated_books,
    publisher_counts,
    publisher_rating_distribution,
    rating_distribution,
    year_counts,
)
from bookstats.transforms.aliases import resolve_author_aliases


def _book(
    authors: str = "Author",
    rating: float = 4.0,
    language_code: str = "eng",
    publisher: str = "Pub",
    year: int | None = 2000,
    total_ratings: int = 100,
    title: str = "Book",
) -> BookRecord:
    return BookRecord(
        title=title,
        authors=authors,
        language_code=language_code,
        rating=rating,
        total_ratings=total_ratings,
        pages=200,
        publication_date=f"1/1/{year}" if year else "unknown",
        publisher=publisher,
        publication_year=year,
    )


def _row(key: str, count: int, total: float = 0.0) -> AggregateRow:
    mean = total / count if count else 0.0
    return AggregateRow(key=key, count=count, total=total, mean=mean, minimum=0.0, maximum=0.0)


# ---------------------------------------------------------------------------
# Engine tests


def test_aggregate_counts_sums_and_means_in_first_seen_order() -> None:
    records = [
        _book(authors="B", rating=4.0),
        _book(authors="A", rating=3.0),
        _book(authors="B", rating=5.0),
    ]
    rows = aggregate(records, lambda record: record.authors, lambda record: record.rating)

    assert [row.key for row in rows] == ["B", "A"]
    b_row = rows[0]
    assert b_row.count == 2
    assert b_row.total == pytest.approx(9.0)
    assert b_row.mean == pytest.approx(4.5)
    assert b_row.minimum == pytest.approx(4.0)
    assert b_row.maximum == pytest.approx(5.0)


def test_aggregate_skips_none_keys_and_defaults_to_unit_values() -> None:
    records = [_book(year=2001), _book(year=None), _book(year=2001)]
    rows = aggregate(records, lambda record: record.publication_year)
    assert len(rows) == 1
    assert rows[0].key == 2001
    assert rows[0].count == 2
    assert rows[0].total == pytest.approx(2.0)


def test_aggregate_empty_input() -> None:
    assert aggregate([], lambda record: record) == []


def test_merged_partials_match_sequential_aggregation() -> None:
    records = [_book(authors=name, rating=rating) for name, rating in zip("ABCABDCA", [1, 2, 3, 4, 5, 3, 2, 1])]
    key_fn = lambda record: record.authors  # noqa: E731
    value_fn = lambda record: record.rating  # noqa: E731

    sequential = aggregate(records, key_fn, value_fn)
    parts = [partial_aggregate(records[i : i + 3], key_fn, value_fn) for i in range(0, len(records), 3)]
    assert finalize(merge_partials(parts)) == sequential


def test_merge_partials_is_associative() -> None:
    a = {"x": PartialAggregate.of(1.0)}
    b = {"y": PartialAggregate.of(2.0), "x": PartialAggregate.of(3.0)}
    c = {"z": PartialAggregate.of(4.0), "y": PartialAggregate.of(5.0)}

    left = merge_partials([merge_partials([a, b]), c])
    right = merge_partials([a, merge_partials([b, c])])
    assert left == right
    assert list(left) == ["x", "y", "z"]


def test_metric_lookup_rejects_unknown_names() -> None:
    row = _row("k", 2, 6.0)
    assert row.metric("count") == 2.0
    assert row.metric("sum") == pytest.approx(6.0)
    assert row.metric("mean") == pytest.approx(3.0)
    with pytest.raises(ValueError):
        row.metric("median")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Ranking tests


def test_top_sorts_descending_with_stable_ties() -> None:
    rows = [_row("a", 1), _row("b", 3), _row("c", 2), _row("d", 3), _row("e", 2), _row("f", 3)]
    ranked = top(10, rows, "count")

    assert [row.key for row in ranked] == ["b", "d", "f", "c", "e", "a"]
    counts = [row.count for row in ranked]
    assert counts == sorted(counts, reverse=True)


def test_top_truncates_and_tolerates_short_inputs() -> None:
    rows = [_row(str(idx), idx) for idx in range(1, 15)]
    assert [row.key for row in top(3, rows, "count")] == ["14", "13", "12"]
    assert len(top(10, rows[:4], "count")) == 4
    assert top(5, [], "count") == []


def test_top_respects_min_count() -> None:
    rows = [_row("solo", 1, 5.0), _row("prolific", 6, 24.0)]
    assert [row.key for row in top(10, rows, "mean")] == ["solo", "prolific"]
    assert [row.key for row in top(10, rows, "mean", min_count=5)] == ["prolific"]


def test_top_rejects_negative_n() -> None:
    with pytest.raises(ValueError):
        top(-1, [], "count")


# ---------------------------------------------------------------------------
# Named view tests


def test_language_counts_excludes_unknown_tags() -> None:
    records = [
        _book(language_code="en-US"),
        _book(language_code="eng"),
        _book(language_code="fre"),
        _book(language_code="9780674842113"),
        _book(language_code="en-GB"),
    ]
    rows = language_counts(records)
    assert [(row.key, row.count) for row in rows] == [("eng", 3), ("fre", 1)]


def test_author_stats_and_alias_merge() -> None:
    records = [
        _book(authors="Weis/Hickman", rating=4.0),
        _book(authors="Margaret Weis/Tracy Hickman", rating=3.0),
        _book(authors="R.A. Salvatore", rating=4.2),
    ]
    raw_keys = [row.key for row in author_stats(records)]
    assert raw_keys == ["Weis/Hickman", "Margaret Weis/Tracy Hickman", "R.A. Salvatore"]

    rows = author_stats(resolve_author_aliases(records))
    assert [row.key for row in rows] == ["Weis/Hickman", "R.A. Salvatore"]
    merged = rows[0]
    assert merged.count == 2
    assert merged.total == pytest.approx(7.0)
    assert merged.mean == pytest.approx(3.5)


def test_year_counts_skips_undefined_years() -> None:
    records = [_book(year=2001), _book(year=None), _book(year=2000), _book(year=2001)]
    assert [(row.key, row.count) for row in year_counts(records)] == [(2001, 2), (2000, 1)]


def test_publisher_views() -> None:
    records = [
        _book(publisher="Vintage", rating=4.0),
        _book(publisher="Penguin", rating=3.0),
        _book(publisher="Vintage", rating=3.0),
        _book(publisher="Tor", rating=4.5),
    ]
    assert [(row.key, row.count) for row in publisher_counts(records)] == [("Vintage", 2), ("Penguin", 1), ("Tor", 1)]

    spread = publisher_rating_distribution(records, ["Tor", "Vintage", "Missing"])
    assert [row.key for row in spread] == ["Tor", "Vintage"]
    assert spread[1].minimum == pytest.approx(3.0)
    assert spread[1].maximum == pytest.approx(4.0)


def test_rating_distribution_rounds_and_orders_by_rating() -> None:
    records = [_book(rating=4.04), _book(rating=3.96), _book(rating=3.5), _book(rating=4.01)]
    rows = rating_distribution(records)
    assert [(row.key, row.count) for row in rows] == [(3.5, 1), (4.0, 3)]


def test_most_rated_books_orders_by_total_ratings() -> None:
    records = [
        _book(title="a", total_ratings=5),
        _book(title="b", total_ratings=50),
        _book(title="c", total_ratings=50),
        _book(title="d", total_ratings=10),
    ]
    assert [book.title for book in most_rated_books(records, 3)] == ["b", "c", "d"]
