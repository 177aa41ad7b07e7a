"""Typed failures raised by the catalog pipeline."""

from __future__ import annotations


class BookStatsError(ValueError):
    """Base class for data-quality problems in the catalog."""


class MissingFieldError(BookStatsError):
    """A raw record lacks a required field or holds an unusable value."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Missing required field '{field}'")


class ParseError(BookStatsError):
    """A derived value (e.g. the publication year) could not be parsed."""


class InsufficientDataError(BookStatsError):
    """A regression fit was requested on too little data."""


__all__ = ["BookStatsError", "MissingFieldError", "ParseError", "InsufficientDataError"]
