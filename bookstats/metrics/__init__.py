"""Aggregations and rankings over normalized catalog records."""

from .aggregation import AggregateRow, aggregate, top
from .views import (
    author_stats,
    language_counts,
    most_rated_books,
    publisher_counts,
    publisher_rating_distribution,
    rating_distribution,
    year_counts,
)

__all__ = [
    "AggregateRow",
    "aggregate",
    "author_stats",
    "language_counts",
    "most_rated_books",
    "publisher_counts",
    "publisher_rating_distribution",
    "rating_distribution",
    "top",
    "year_counts",
]
