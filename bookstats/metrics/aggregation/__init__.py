"""Grouped aggregation and ranking over record collections."""

from .engine import aggregate, finalize, merge_partials, partial_aggregate
from .ranking import sort_rows, top
from .records import METRIC_NAMES, AggregateRow, GroupKey, MetricName, PartialAggregate

__all__ = [
    "METRIC_NAMES",
    "AggregateRow",
    "GroupKey",
    "MetricName",
    "PartialAggregate",
    "aggregate",
    "finalize",
    "merge_partials",
    "partial_aggregate",
    "sort_rows",
    "top",
]
