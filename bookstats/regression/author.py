"""Per-author ``rating ~ pages`` model."""

from __future__ import annotations

from typing import Iterable, List

from bookstats.datahub.records import BookRecord
from bookstats.transforms.filters import exclude_titles, filter_author

from .linear import LinearModelConfig, LinearModeler
from .records import RegressionModel

# Audio-only and disc editions share titles with the print books they narrate.
DEFAULT_NON_BOOK_PATTERN = r"\baudio|\bcd\b|cassette"


def author_bibliography(
    records: Iterable[BookRecord],
    author: str,
    exclude_pattern: str = DEFAULT_NON_BOOK_PATTERN,
) -> List[BookRecord]:
    return exclude_titles(filter_author(records, author), exclude_pattern)


def fit_author_model(
    records: Iterable[BookRecord],
    author: str,
    exclude_pattern: str = DEFAULT_NON_BOOK_PATTERN,
) -> RegressionModel:
    """Fit ``rating ~ pages`` on one author's books; raises InsufficientDataError for tiny bibliographies."""
    books = author_bibliography(records, author, exclude_pattern)
    modeler = LinearModeler(LinearModelConfig(predictor="pages", response="rating"))
    modeler.fit([book.pages for book in books], [book.rating for book in books])
    return modeler.fitted_model


__all__ = ["DEFAULT_NON_BOOK_PATTERN", "author_bibliography", "fit_author_model"]
