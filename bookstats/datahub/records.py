from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BookRecord:
    """Single normalized catalog entry."""

    title: str
    authors: str
    language_code: str
    rating: float
    total_ratings: int
    pages: int
    publication_date: str
    publisher: str
    publication_year: Optional[int] = None
