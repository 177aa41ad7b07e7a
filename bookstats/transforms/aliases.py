"""Collapse alternate author renderings before re-aggregating."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Mapping

from bookstats.datahub.records import BookRecord

DEFAULT_AUTHOR_ALIASES: Mapping[str, str] = {
    "Margaret Weis/Tracy Hickman": "Weis/Hickman",
}


def resolve_alias(authors: str, aliases: Mapping[str, str] = DEFAULT_AUTHOR_ALIASES) -> str:
    """Look up the canonical byline; unknown names are returned unchanged."""
    return aliases.get(authors, authors)


def resolve_author_aliases(
    records: Iterable[BookRecord],
    aliases: Mapping[str, str] = DEFAULT_AUTHOR_ALIASES,
) -> List[BookRecord]:
    """Return new records whose ``authors`` field has been passed through the alias table."""
    resolved: List[BookRecord] = []
    for record in records:
        canonical = resolve_alias(record.authors, aliases)
        resolved.append(record if canonical == record.authors else replace(record, authors=canonical))
    return resolved


__all__ = ["DEFAULT_AUTHOR_ALIASES", "resolve_alias", "resolve_author_aliases"]
