"""Pure record-level transforms applied before aggregation."""

from .aliases import DEFAULT_AUTHOR_ALIASES, resolve_alias, resolve_author_aliases
from .filters import (
    DEFAULT_RATING_FLOOR,
    canonicalize_languages,
    derive_years,
    exclude_titles,
    extract_year,
    filter_author,
    filter_english_rated,
    filter_language,
    filter_min_rating,
)
from .language import CANONICAL_ENGLISH, LanguageClass, canonicalize_language, classify_language

__all__ = [
    "CANONICAL_ENGLISH",
    "DEFAULT_AUTHOR_ALIASES",
    "DEFAULT_RATING_FLOOR",
    "LanguageClass",
    "canonicalize_language",
    "canonicalize_languages",
    "classify_language",
    "derive_years",
    "exclude_titles",
    "extract_year",
    "filter_author",
    "filter_english_rated",
    "filter_language",
    "filter_min_rating",
    "resolve_alias",
    "resolve_author_aliases",
]
