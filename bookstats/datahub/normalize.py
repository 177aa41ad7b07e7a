"""Schema normalization: rename source columns, drop identifiers, reject incomplete rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Tuple

from bookstats.errors import MissingFieldError

from .config import COLUMN_RENAMES, DROPPED_COLUMNS, REQUIRED_FIELDS
from .helpers import ensure_mapping, is_missing, to_float, to_int, to_text
from .records import BookRecord

MIN_RATING = 0.0
MAX_RATING = 5.0


@dataclass(frozen=True)
class NormalizedCatalog:
    """Normalized records plus the number of raw rows that were rejected."""

    records: Tuple[BookRecord, ...]
    dropped: int

    @property
    def total(self) -> int:
        return len(self.records) + self.dropped


def rename_fields(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Map source columns onto BookRecord field names, discarding everything else."""
    renamed: Dict[str, Any] = {}
    for column, value in row.items():
        name = str(column).strip()
        if name in DROPPED_COLUMNS:
            continue
        target = COLUMN_RENAMES.get(name)
        if target is not None:
            renamed[target] = value
    return renamed


def normalize_record(row: Mapping[str, Any]) -> BookRecord:
    """Build a BookRecord from one raw row or raise MissingFieldError."""
    try:
        mapping = ensure_mapping(row)
    except TypeError as exc:
        raise MissingFieldError("row", str(exc)) from exc
    fields = rename_fields(mapping)
    for name in REQUIRED_FIELDS:
        if is_missing(fields.get(name)):
            raise MissingFieldError(name)

    try:
        rating = to_float(fields["rating"])
    except ValueError as exc:
        raise MissingFieldError("rating", str(exc)) from exc
    if not MIN_RATING <= rating <= MAX_RATING:
        raise MissingFieldError("rating", f"Rating {rating} outside [{MIN_RATING}, {MAX_RATING}]")

    try:
        pages = to_int(fields["pages"])
    except ValueError as exc:
        raise MissingFieldError("pages", str(exc)) from exc
    try:
        total_ratings = to_int(fields["total_ratings"])
    except ValueError as exc:
        raise MissingFieldError("total_ratings", str(exc)) from exc
    if pages < 0:
        raise MissingFieldError("pages", f"Negative page count {pages}")

    return BookRecord(
        title=to_text(fields["title"]),
        authors=to_text(fields["authors"]),
        language_code=to_text(fields["language_code"]),
        rating=rating,
        total_ratings=total_ratings,
        pages=pages,
        publication_date=to_text(fields["publication_date"]),
        publisher=to_text(fields["publisher"]),
    )


def normalize_records(rows: Iterable[Mapping[str, Any]]) -> NormalizedCatalog:
    """Normalize every row, dropping the ones that are incomplete, malformed or not mappings at all."""
    records = []
    dropped = 0
    for row in rows:
        try:
            records.append(normalize_record(row))
        except MissingFieldError:
            dropped += 1

    if dropped:
        print(f"[datahub] Dropped {dropped} incomplete records; kept {len(records)}")
    return NormalizedCatalog(records=tuple(records), dropped=dropped)


__all__ = ["NormalizedCatalog", "normalize_record", "normalize_records", "rename_fields"]
