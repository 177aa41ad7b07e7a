"""Tunable analysis choices with documented defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from bookstats.regression.author import DEFAULT_NON_BOOK_PATTERN
from bookstats.regression.growth import DEFAULT_CUTOFF_YEAR
from bookstats.transforms.aliases import DEFAULT_AUTHOR_ALIASES
from bookstats.transforms.filters import DEFAULT_RATING_FLOOR
from bookstats.transforms.language import CANONICAL_ENGLISH


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for `run_analysis`.

    Attributes:
        rating_floor: Ratings below this are treated as placeholders and filtered out.
        language: Canonical language kept by the main filter.
        growth_cutoff_year: Last year used by the growth model (``None`` = all years).
        forecast_years: Years the growth model extrapolates to.
        top_n: Length of every ranking.
        min_author_books: Minimum bibliography size for the average-rating ranking.
        author: Author for the rating ~ pages model (defaults to the most prolific one).
        non_book_pattern: Title regex identifying non-book editions excluded from that model.
        author_aliases: Alternate bylines collapsed before the second author pass.
    """

    rating_floor: float = DEFAULT_RATING_FLOOR
    language: str = CANONICAL_ENGLISH
    growth_cutoff_year: Optional[int] = DEFAULT_CUTOFF_YEAR
    forecast_years: Tuple[int, ...] = (2007, 2008, 2009, 2010)
    top_n: int = 10
    min_author_books: int = 5
    author: Optional[str] = None
    non_book_pattern: str = DEFAULT_NON_BOOK_PATTERN
    author_aliases: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_AUTHOR_ALIASES))

    def validate(self) -> None:
        if not 0.0 <= self.rating_floor <= 5.0:
            raise ValueError("rating_floor must fall within [0, 5].")
        if self.top_n <= 0:
            raise ValueError("top_n must be positive.")
        if self.min_author_books < 1:
            raise ValueError("min_author_books must be at least 1.")
        if not self.language:
            raise ValueError("language cannot be empty.")


__all__ = ["AnalysisConfig"]
