"""Group-by aggregation built from mergeable per-partition partial states."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

from .records import AggregateRow, GroupKey, PartialAggregate

RecordT = TypeVar("RecordT")
KeyFn = Callable[[RecordT], Optional[GroupKey]]
ValueFn = Callable[[RecordT], float]
Partials = Dict[GroupKey, PartialAggregate]


def _unit(_: object) -> float:
    return 1.0


def partial_aggregate(
    records: Iterable[RecordT],
    key_fn: KeyFn,
    value_fn: Optional[ValueFn] = None,
) -> Partials:
    """Fold records into per-key partial states, keyed in first-encountered order.

    Records whose key is ``None`` are skipped. Without ``value_fn`` every record
    contributes 1.0, which is enough for count-only groupings.
    """
    value_of = value_fn or _unit
    partials: Partials = {}
    for record in records:
        key = key_fn(record)
        if key is None:
            continue
        state = PartialAggregate.of(float(value_of(record)))
        existing = partials.get(key)
        partials[key] = state if existing is None else existing.combine(state)
    return partials


def merge_partials(parts: Sequence[Partials]) -> Partials:
    """Merge partition results in partition order; new keys are appended as they are first seen."""
    merged: Partials = {}
    for part in parts:
        for key, state in part.items():
            existing = merged.get(key)
            merged[key] = state if existing is None else existing.combine(state)
    return merged


def finalize(partials: Partials) -> List[AggregateRow]:
    rows: List[AggregateRow] = []
    for key, state in partials.items():
        rows.append(
            AggregateRow(
                key=key,
                count=state.count,
                total=state.total,
                mean=state.total / state.count,
                minimum=state.minimum,
                maximum=state.maximum,
            )
        )
    return rows


def aggregate(
    records: Iterable[RecordT],
    key_fn: KeyFn,
    value_fn: Optional[ValueFn] = None,
) -> List[AggregateRow]:
    """Produce one AggregateRow per distinct key, in first-encountered key order."""
    return finalize(partial_aggregate(records, key_fn, value_fn))
