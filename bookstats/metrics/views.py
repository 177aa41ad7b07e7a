"""Named aggregations reported by the catalog analysis."""

from __future__ import annotations

from typing import Collection, Iterable, List, Optional

from bookstats.datahub.records import BookRecord
from bookstats.transforms.language import canonicalize_language, is_known_language

from .aggregation import AggregateRow, aggregate


def _rating(record: BookRecord) -> float:
    return record.rating


def language_counts(records: Iterable[BookRecord]) -> List[AggregateRow]:
    """Books per canonical language; numeric and blank tags are left out."""

    def key(record: BookRecord) -> Optional[str]:
        if not is_known_language(record.language_code):
            return None
        return canonicalize_language(record.language_code)

    return aggregate(records, key)


def author_stats(records: Iterable[BookRecord]) -> List[AggregateRow]:
    """Per-author count, cumulative rating (``sum``) and average rating (``mean``)."""
    return aggregate(records, lambda record: record.authors, _rating)


def year_counts(records: Iterable[BookRecord]) -> List[AggregateRow]:
    """Books per publication year; records without a derived year are skipped."""
    return aggregate(records, lambda record: record.publication_year)


def publisher_counts(records: Iterable[BookRecord]) -> List[AggregateRow]:
    return aggregate(records, lambda record: record.publisher, _rating)


def publisher_rating_distribution(
    records: Iterable[BookRecord],
    publishers: Collection[str],
) -> List[AggregateRow]:
    """Rating spread (count/mean/min/max) for the selected publishers, in the order given."""
    wanted = list(publishers)
    rows = {
        row.key: row
        for row in aggregate(
            records,
            lambda record: record.publisher if record.publisher in wanted else None,
            _rating,
        )
    }
    return [rows[publisher] for publisher in wanted if publisher in rows]


def rating_distribution(records: Iterable[BookRecord], precision: int = 1) -> List[AggregateRow]:
    """Books per rounded rating value, ordered by rating."""
    rows = aggregate(records, lambda record: round(record.rating, precision))
    return sorted(rows, key=lambda row: row.key)


def most_rated_books(records: Iterable[BookRecord], n: int) -> List[BookRecord]:
    """Books with the most ratings; ties keep catalog order."""
    return sorted(records, key=lambda record: record.total_ratings, reverse=True)[:n]


__all__ = [
    "author_stats",
    "language_counts",
    "most_rated_books",
    "publisher_counts",
    "publisher_rating_distribution",
    "rating_distribution",
    "year_counts",
]
