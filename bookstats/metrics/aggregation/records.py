"""Shared data records for grouped aggregation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Literal

GroupKey = Hashable
MetricName = Literal["count", "sum", "mean", "min", "max"]
METRIC_NAMES = ("count", "sum", "mean", "min", "max")


@dataclass(frozen=True)
class PartialAggregate:
    """Associative running state for one group: enough to finalize every metric."""

    count: int
    total: float
    minimum: float
    maximum: float

    @classmethod
    def of(cls, value: float) -> "PartialAggregate":
        return cls(count=1, total=value, minimum=value, maximum=value)

    def combine(self, other: "PartialAggregate") -> "PartialAggregate":
        return PartialAggregate(
            count=self.count + other.count,
            total=self.total + other.total,
            minimum=min(self.minimum, other.minimum),
            maximum=max(self.maximum, other.maximum),
        )


@dataclass(frozen=True)
class AggregateRow:
    """Summary of all records sharing one group key."""

    key: GroupKey
    count: int
    total: float
    mean: float
    minimum: float
    maximum: float

    def metric(self, name: MetricName) -> float:
        if name == "count":
            return float(self.count)
        if name == "sum":
            return self.total
        if name == "mean":
            return self.mean
        if name == "min":
            return self.minimum
        if name == "max":
            return self.maximum
        raise ValueError(f"Unknown metric '{name}'. Expected one of: {', '.join(METRIC_NAMES)}")
