from .io import load_catalog, read_catalog_frame, read_catalog_rows
from .normalize import NormalizedCatalog, normalize_record, normalize_records
from .records import BookRecord

__all__ = [
    "BookRecord",
    "NormalizedCatalog",
    "load_catalog",
    "normalize_record",
    "normalize_records",
    "read_catalog_frame",
    "read_catalog_rows",
]
