"""Record filters and derived fields. Every helper returns a new list."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Iterable, List, Optional, Pattern, Union

from bookstats.datahub.records import BookRecord
from bookstats.errors import ParseError

from .language import CANONICAL_ENGLISH, canonicalize_language

DEFAULT_RATING_FLOOR = 2.5
YEAR_DIGITS = 4
YEAR_PATTERN = re.compile(r"[0-9]{4}")


def canonicalize_languages(records: Iterable[BookRecord]) -> List[BookRecord]:
    """Rewrite each record's language tag to its canonical form."""
    result: List[BookRecord] = []
    for record in records:
        canonical = canonicalize_language(record.language_code)
        result.append(record if canonical == record.language_code else replace(record, language_code=canonical))
    return result


def filter_language(records: Iterable[BookRecord], language: str = CANONICAL_ENGLISH) -> List[BookRecord]:
    """Keep records whose canonical language equals ``language``."""
    return [record for record in records if canonicalize_language(record.language_code) == language]


def filter_min_rating(records: Iterable[BookRecord], floor: float = DEFAULT_RATING_FLOOR) -> List[BookRecord]:
    """Drop placeholder entries rated below ``floor``."""
    return [record for record in records if record.rating >= floor]


def filter_english_rated(
    records: Iterable[BookRecord],
    floor: float = DEFAULT_RATING_FLOOR,
    language: str = CANONICAL_ENGLISH,
) -> List[BookRecord]:
    return filter_min_rating(filter_language(canonicalize_languages(records), language), floor)


def extract_year(publication_date: str) -> int:
    """Parse the trailing four characters of a date string (``"9/16/2006"`` -> 2006)."""
    tail = publication_date.strip()[-YEAR_DIGITS:]
    if not YEAR_PATTERN.fullmatch(tail):
        raise ParseError(f"Cannot derive a year from {publication_date!r}")
    return int(tail)


def try_extract_year(publication_date: str) -> Optional[int]:
    try:
        return extract_year(publication_date)
    except ParseError:
        return None


def derive_years(records: Iterable[BookRecord]) -> List[BookRecord]:
    """Attach ``publication_year``; unparseable dates leave it as None."""
    return [replace(record, publication_year=try_extract_year(record.publication_date)) for record in records]


def filter_author(records: Iterable[BookRecord], author: str) -> List[BookRecord]:
    return [record for record in records if record.authors == author]


def exclude_titles(records: Iterable[BookRecord], pattern: Union[str, Pattern[str]]) -> List[BookRecord]:
    """Remove entries whose title matches ``pattern`` (case-insensitive when given as a string)."""
    compiled = re.compile(pattern, re.IGNORECASE) if isinstance(pattern, str) else pattern
    return [record for record in records if not compiled.search(record.title)]


__all__ = [
    "DEFAULT_RATING_FLOOR",
    "canonicalize_languages",
    "derive_years",
    "exclude_titles",
    "extract_year",
    "filter_author",
    "filter_english_rated",
    "filter_language",
    "filter_min_rating",
    "try_extract_year",
]
