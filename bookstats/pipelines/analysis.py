"""End-to-end catalog analysis: normalize, filter, aggregate, rank and model."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from bookstats.config import AnalysisConfig
from bookstats.datahub.io import read_catalog_rows
from bookstats.datahub.normalize import NormalizedCatalog, normalize_records
from bookstats.datahub.records import BookRecord
from bookstats.errors import InsufficientDataError
from bookstats.metrics.aggregation import AggregateRow, top
from bookstats.metrics.views import (
    author_stats,
    language_counts,
    most_rated_books,
    publisher_counts,
    publisher_rating_distribution,
    rating_distribution,
    year_counts,
)
from bookstats.regression.author import author_bibliography, fit_author_model
from bookstats.regression.growth import fit_growth_model, predict_book_counts
from bookstats.regression.records import RegressionModel
from bookstats.transforms.aliases import resolve_alias, resolve_author_aliases
from bookstats.transforms.filters import derive_years, filter_english_rated


@dataclass(frozen=True)
class AuthorRankings:
    by_count: List[AggregateRow]
    by_total_rating: List[AggregateRow]
    by_mean_rating: List[AggregateRow]


@dataclass
class CatalogReport:
    """Every table and model produced by one analysis run."""

    config: AnalysisConfig
    catalog: NormalizedCatalog
    filtered: Tuple[BookRecord, ...]
    languages: List[AggregateRow]
    ratings: List[AggregateRow]
    years: List[AggregateRow]
    raw_authors: AuthorRankings
    authors: AuthorRankings
    publishers: List[AggregateRow]
    publisher_ratings: List[AggregateRow]
    most_rated: List[BookRecord]
    growth_model: Optional[RegressionModel] = None
    growth_forecast: Dict[int, float] = field(default_factory=dict)
    author: Optional[str] = None
    author_books: List[BookRecord] = field(default_factory=list)
    author_model: Optional[RegressionModel] = None
    skipped: Dict[str, str] = field(default_factory=dict)


def rank_authors(records: Iterable[BookRecord], n: int, min_books: int) -> AuthorRankings:
    rows = author_stats(records)
    return AuthorRankings(
        by_count=top(n, rows, "count"),
        by_total_rating=top(n, rows, "sum"),
        by_mean_rating=top(n, rows, "mean", min_count=min_books),
    )


def run_analysis(rows: Iterable[Mapping[str, Any]], config: Optional[AnalysisConfig] = None) -> CatalogReport:
    """Run the full pipeline over raw catalog rows.

    Model sections that lack data are recorded in ``CatalogReport.skipped``
    instead of aborting the run.
    """
    cfg = config or AnalysisConfig()
    cfg.validate()

    catalog = normalize_records(rows)
    filtered = derive_years(filter_english_rated(catalog.records, cfg.rating_floor, cfg.language))
    print(f"[analysis] {len(filtered)} of {len(catalog.records)} records kept after language/rating filters")

    # Authors are ranked twice: the second pass merges alternate bylines first.
    raw_authors = rank_authors(filtered, cfg.top_n, cfg.min_author_books)
    resolved = resolve_author_aliases(filtered, cfg.author_aliases)
    authors = rank_authors(resolved, cfg.top_n, cfg.min_author_books)

    publishers = top(cfg.top_n, publisher_counts(filtered), "count")
    years = sorted(year_counts(filtered), key=lambda row: int(row.key))

    report = CatalogReport(
        config=cfg,
        catalog=catalog,
        filtered=tuple(filtered),
        languages=top(cfg.top_n, language_counts(catalog.records), "count"),
        ratings=rating_distribution(filtered),
        years=years,
        raw_authors=raw_authors,
        authors=authors,
        publishers=publishers,
        publisher_ratings=publisher_rating_distribution(filtered, [str(row.key) for row in publishers]),
        most_rated=most_rated_books(filtered, cfg.top_n),
    )

    try:
        report.growth_model = fit_growth_model(years, cfg.growth_cutoff_year)
    except InsufficientDataError as exc:
        report.skipped["growth"] = str(exc)
        print(f"[analysis] Skipping growth model: {exc}")
    else:
        forecast = predict_book_counts(report.growth_model, list(cfg.forecast_years)) if cfg.forecast_years else []
        report.growth_forecast = {year: float(count) for year, count in zip(cfg.forecast_years, forecast)}

    if cfg.author:
        report.author = resolve_alias(cfg.author, cfg.author_aliases)
    elif authors.by_count:
        report.author = str(authors.by_count[0].key)
    if report.author is None:
        report.skipped["author"] = "No authors left after filtering."
        print("[analysis] Skipping author model: no authors left after filtering")
    else:
        report.author_books = author_bibliography(resolved, report.author, cfg.non_book_pattern)
        try:
            report.author_model = fit_author_model(resolved, report.author, cfg.non_book_pattern)
        except InsufficientDataError as exc:
            report.skipped["author"] = str(exc)
            print(f"[analysis] Skipping author model for {report.author}: {exc}")

    return report


def analyze_catalog(path: Path, config: Optional[AnalysisConfig] = None) -> CatalogReport:
    """Read the catalog file and run the full analysis."""
    return run_analysis(read_catalog_rows(path), config)


__all__ = ["AuthorRankings", "CatalogReport", "analyze_catalog", "rank_authors", "run_analysis"]
