"""Helpers for reading the delimited catalog export from disk."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .config import GOODREADS, CatalogSourceConfig
from .normalize import NormalizedCatalog, normalize_records


def read_catalog_frame(path: Path, source: CatalogSourceConfig = GOODREADS) -> pd.DataFrame:
    """Load the raw catalog as strings, skipping lines with the wrong number of fields."""
    if not path.exists():
        raise FileNotFoundError(
            f"Missing catalog at {path}. Download the Goodreads books export and pass it via --catalog."
        )
    frame = pd.read_csv(
        path,
        sep=source["delimiter"],
        encoding=source["encoding"],
        dtype=str,
        on_bad_lines="skip",
    )
    frame.columns = [str(column).strip() for column in frame.columns]
    return frame


def read_catalog_rows(path: Path, source: CatalogSourceConfig = GOODREADS) -> List[Dict[str, Any]]:
    """Return raw rows as plain dictionaries (missing cells become NaN)."""
    frame = read_catalog_frame(path, source)
    print(f"[datahub] Read {len(frame)} rows from {path}")
    return frame.to_dict(orient="records")


def load_catalog(path: Path, source: CatalogSourceConfig = GOODREADS) -> NormalizedCatalog:
    """Read and normalize the catalog in one call."""
    return normalize_records(read_catalog_rows(path, source))


__all__ = ["load_catalog", "read_catalog_frame", "read_catalog_rows"]
