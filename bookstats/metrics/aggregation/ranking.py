"""Top-N selection with stable tie-breaking."""

from __future__ import annotations

from typing import Iterable, List

from .records import AggregateRow, MetricName


def sort_rows(rows: Iterable[AggregateRow], by: MetricName) -> List[AggregateRow]:
    """Sort descending by ``by``; equal metrics keep their input order."""
    # sorted() stays stable with reverse=True
    return sorted(rows, key=lambda row: row.metric(by), reverse=True)


def top(n: int, rows: Iterable[AggregateRow], by: MetricName, min_count: int = 1) -> List[AggregateRow]:
    """Return the first ``n`` rows of the descending ranking (fewer if not enough groups)."""
    if n < 0:
        raise ValueError("n must be non-negative.")
    eligible = [row for row in rows if row.count >= min_count]
    return sort_rows(eligible, by)[:n]
