"""Language-tag canonicalization."""

from __future__ import annotations

import re
from enum import Enum

CANONICAL_ENGLISH = "eng"
ENGLISH_TAG_PATTERN = re.compile(r"en(g|-GB|-US|-CA)?")


class LanguageClass(str, Enum):
    CANONICAL = "canonical"
    KNOWN = "known"
    UNKNOWN = "unknown"


def canonicalize_language(tag: str) -> str:
    """Collapse English locale variants ("en", "en-US", ...) to ``"eng"``; pass other tags through."""
    if ENGLISH_TAG_PATTERN.fullmatch(tag):
        return CANONICAL_ENGLISH
    return tag


def classify_language(tag: str) -> LanguageClass:
    """Numeric and blank tags are unknown; they never take part in language rankings."""
    stripped = tag.strip()
    if not stripped or stripped.isdigit():
        return LanguageClass.UNKNOWN
    if canonicalize_language(stripped) == CANONICAL_ENGLISH:
        return LanguageClass.CANONICAL
    return LanguageClass.KNOWN


def is_known_language(tag: str) -> bool:
    return classify_language(tag) is not LanguageClass.UNKNOWN


__all__ = [
    "CANONICAL_ENGLISH",
    "ENGLISH_TAG_PATTERN",
    "LanguageClass",
    "canonicalize_language",
    "classify_language",
    "is_known_language",
]
