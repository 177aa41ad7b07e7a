"""Console tables and figure export for a finished CatalogReport."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from bookstats.metrics.aggregation import AggregateRow
from bookstats.pipelines.analysis import CatalogReport
from experiments.plots import (
    PlotSaveConfig,
    plot_author_model,
    plot_growth,
    plot_publisher_ratings,
    plot_rating_distribution,
    plot_ranking,
    rows_to_frame,
)


def _print_table(title: str, rows: Sequence[AggregateRow], key_label: str, columns: Sequence[str]) -> None:
    print(f"\n== {title}")
    if not rows:
        print("(no rows)")
        return
    df = rows_to_frame(rows, key_label)[[key_label, *columns]]
    print(df.to_string(index=False, float_format=lambda value: f"{value:.3f}"))


def print_report(report: CatalogReport) -> None:
    """Print every ranking and model summary."""
    catalog = report.catalog
    print(f"[analysis] Normalized {len(catalog.records)} records (dropped {catalog.dropped} of {catalog.total})")

    _print_table("Top languages", report.languages, "language", ["count"])
    _print_table("Rating distribution", report.ratings, "rating", ["count"])
    _print_table("Books per year", report.years, "year", ["count"])
    _print_table("Top authors by books", report.authors.by_count, "author", ["count", "mean"])
    _print_table("Top authors by cumulative rating", report.authors.by_total_rating, "author", ["sum", "count"])
    _print_table(
        f"Top authors by average rating (≥{report.config.min_author_books} books)",
        report.authors.by_mean_rating,
        "author",
        ["mean", "count"],
    )
    _print_table("Top publishers by books", report.publishers, "publisher", ["count", "mean"])
    _print_table("Publisher rating spread", report.publisher_ratings, "publisher", ["mean", "min", "max"])

    print("\n== Most rated books")
    most_rated = pd.DataFrame(
        {
            "title": [book.title for book in report.most_rated],
            "authors": [book.authors for book in report.most_rated],
            "ratings": [book.total_ratings for book in report.most_rated],
        }
    )
    print(most_rated.to_string(index=False) if not most_rated.empty else "(no rows)")

    if report.growth_model is not None:
        print("\n== Growth model")
        print(report.growth_model.summary())
        for year, count in report.growth_forecast.items():
            print(f"  forecast {year}: {count:,.0f} books")
    if report.author_model is not None:
        print(f"\n== Rating ~ pages for {report.author}")
        print(report.author_model.summary())
    for section, reason in report.skipped.items():
        print(f"\n[analysis] Section '{section}' skipped: {reason}")


def save_report_plots(report: CatalogReport, save_config: Optional[PlotSaveConfig]) -> List[Path]:
    """Render every figure; with no save config the figures open interactively."""
    dest = save_config.for_plot if save_config else (lambda _slug: None)
    written: List[Path] = []
    written += plot_ranking(report.languages, "count", "Books per language", "language", save_to=dest("languages"))
    written += plot_rating_distribution(report.ratings, save_to=dest("ratings"))
    written += plot_ranking(
        report.authors.by_count, "count", "Most prolific authors", "author", save_to=dest("authors_count")
    )
    written += plot_ranking(
        report.authors.by_total_rating,
        "sum",
        "Authors by cumulative rating",
        "author",
        save_to=dest("authors_total_rating"),
    )
    written += plot_ranking(
        report.authors.by_mean_rating,
        "mean",
        "Authors by average rating",
        "author",
        save_to=dest("authors_mean_rating"),
    )
    written += plot_ranking(report.publishers, "count", "Most prolific publishers", "publisher", save_to=dest("publishers"))
    written += plot_publisher_ratings(
        report.filtered,
        [str(row.key) for row in report.publishers],
        save_to=dest("publisher_ratings"),
    )
    written += plot_growth(report.years, report.growth_model, report.growth_forecast, save_to=dest("growth"))
    if report.author:
        written += plot_author_model(report.author_books, report.author_model, report.author, save_to=dest("author_model"))
    return written


__all__ = ["print_report", "save_report_plots"]
