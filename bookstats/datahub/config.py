"""Static configuration for catalog ingestion paths and column layout."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple, TypedDict


class CatalogSourceConfig(TypedDict):
    file_name: str
    delimiter: str
    encoding: str


# Default locations used by the Typer CLI; callers may override these.
DEFAULT_RAW_ROOT = Path("data/raw")
DEFAULT_PLOTS_ROOT = Path("data/plots")

# ---------------------------------------------------------------------------
# Source layout of the Goodreads catalog export.

GOODREADS: CatalogSourceConfig = {
    "file_name": "books.csv",
    "delimiter": ",",
    "encoding": "utf-8",
}

DEFAULT_CATALOG_PATH = DEFAULT_RAW_ROOT / GOODREADS["file_name"]

# Source column -> BookRecord field.
COLUMN_RENAMES: Dict[str, str] = {
    "title": "title",
    "authors": "authors",
    "language_code": "language_code",
    "average_rating": "rating",
    "ratings_count": "total_ratings",
    "num_pages": "pages",
    "publication_date": "publication_date",
    "publisher": "publisher",
}

# Internal identifiers and counters the analysis never reads.
DROPPED_COLUMNS: Tuple[str, ...] = ("bookID", "id", "isbn", "isbn13", "text_reviews_count")

REQUIRED_FIELDS: Tuple[str, ...] = tuple(COLUMN_RENAMES.values())


__all__ = [
    "COLUMN_RENAMES",
    "CatalogSourceConfig",
    "DEFAULT_CATALOG_PATH",
    "DEFAULT_PLOTS_ROOT",
    "DEFAULT_RAW_ROOT",
    "DROPPED_COLUMNS",
    "GOODREADS",
    "REQUIRED_FIELDS",
]
