"""Orchestration of the catalog analysis."""

from .analysis import AuthorRankings, CatalogReport, analyze_catalog, rank_authors, run_analysis

__all__ = [
    "AuthorRankings",
    "CatalogReport",
    "analyze_catalog",
    "rank_authors",
    "run_analysis",
]
