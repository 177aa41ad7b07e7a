from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from bookstats.config import AnalysisConfig
from bookstats.datahub.config import DEFAULT_CATALOG_PATH, DEFAULT_PLOTS_ROOT
from bookstats.datahub.io import load_catalog
from bookstats.errors import InsufficientDataError
from bookstats.metrics.views import year_counts
from bookstats.pipelines import analyze_catalog
from bookstats.regression import (
    DEFAULT_CUTOFF_YEAR,
    DEFAULT_NON_BOOK_PATTERN,
    fit_author_model,
    fit_growth_model,
    predict_book_counts,
)
from bookstats.transforms import derive_years, filter_english_rated, resolve_alias, resolve_author_aliases
from bookstats.transforms.filters import DEFAULT_RATING_FLOOR
from experiments.catalog_report import print_report, save_report_plots
from experiments.plots import PlotSaveConfig

app = typer.Typer()

CATALOG_OPTION = typer.Option(
    DEFAULT_CATALOG_PATH,
    "--catalog",
    exists=False,
    dir_okay=False,
    help="Delimited Goodreads books export.",
)


def _validated(config: AnalysisConfig) -> AnalysisConfig:
    try:
        config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return config


@app.command()
def summary(
    catalog: Path = CATALOG_OPTION,
    rating_floor: float = typer.Option(DEFAULT_RATING_FLOOR, "--rating-floor", help="Minimum rating kept."),
    cutoff: int = typer.Option(DEFAULT_CUTOFF_YEAR, "--cutoff", help="Last year used by the growth model."),
    top_n: int = typer.Option(10, "--top", help="Length of every ranking."),
    min_author_books: int = typer.Option(
        5,
        "--min-author-books",
        help="Minimum books for the average-rating author ranking.",
    ),
    author: Optional[str] = typer.Option(
        None,
        "--author",
        help="Author for the rating ~ pages model (defaults to the most prolific one).",
    ),
) -> None:
    """
    Normalize the catalog, print every ranking and fit both models.
    """
    config = _validated(
        AnalysisConfig(
            rating_floor=rating_floor,
            growth_cutoff_year=cutoff,
            top_n=top_n,
            min_author_books=min_author_books,
            author=author,
        )
    )
    print_report(analyze_catalog(catalog, config))


@app.command()
def growth(
    catalog: Path = CATALOG_OPTION,
    cutoff: int = typer.Option(DEFAULT_CUTOFF_YEAR, "--cutoff", help="Last year included in the fit."),
    predict: List[int] = typer.Option(
        [2007, 2008, 2009, 2010],
        "--predict",
        help="Years to forecast (repeat the flag).",
        show_default=True,
    ),
    rating_floor: float = typer.Option(DEFAULT_RATING_FLOOR, "--rating-floor"),
) -> None:
    """Fit log(total_books) ~ publication_year and forecast future years."""
    records = derive_years(filter_english_rated(load_catalog(catalog).records, rating_floor))
    try:
        model = fit_growth_model(year_counts(records), cutoff)
    except InsufficientDataError as exc:
        print(f"[growth] {exc}")
        raise typer.Exit(code=1) from exc

    print(model.summary())
    for year, count in zip(predict, predict_book_counts(model, predict)):
        print(f"{year}: {count:,.0f} books")


@app.command("author-model")
def author_model(
    author: str = typer.Option(..., "--author", help="Author byline; known alternate renderings are merged."),
    catalog: Path = CATALOG_OPTION,
    pages: List[int] = typer.Option([], "--pages", help="Page counts to predict ratings for."),
    exclude_pattern: str = typer.Option(
        DEFAULT_NON_BOOK_PATTERN,
        "--exclude-pattern",
        help="Title regex for non-book editions to leave out.",
    ),
    rating_floor: float = typer.Option(DEFAULT_RATING_FLOOR, "--rating-floor"),
) -> None:
    """Fit rating ~ pages on one author's bibliography."""
    records = resolve_author_aliases(filter_english_rated(load_catalog(catalog).records, rating_floor))
    try:
        model = fit_author_model(records, resolve_alias(author), exclude_pattern)
    except InsufficientDataError as exc:
        print(f"[author-model] {exc}")
        raise typer.Exit(code=1) from exc

    print(model.summary())
    for page_count in pages:
        print(f"{page_count} pages → predicted rating {model.predict_one(page_count):.3f}")


@app.command()
def plots(
    catalog: Path = CATALOG_OPTION,
    plots_root: Path = typer.Option(
        DEFAULT_PLOTS_ROOT,
        "--plots-root",
        file_okay=False,
        dir_okay=True,
        writable=True,
        help="Directory where plots should be saved (subfolders are created automatically).",
    ),
    plots_tag: Optional[str] = typer.Option(
        None,
        "--plots-tag",
        help="Folder suffix for this run (defaults to timestamp).",
    ),
    save_static: bool = typer.Option(False, help="Write static PNG snapshots (requires kaleido)."),
    save_html: bool = typer.Option(True, help="Write interactive HTML plots."),
    cutoff: int = typer.Option(DEFAULT_CUTOFF_YEAR, "--cutoff"),
    top_n: int = typer.Option(10, "--top"),
) -> None:
    """Run the analysis and save every figure."""
    config = _validated(AnalysisConfig(growth_cutoff_year=cutoff, top_n=top_n))
    report = analyze_catalog(catalog, config)

    tag = plots_tag or datetime.utcnow().strftime("%Y%m%d-%H%M%S")
    save_config = PlotSaveConfig(base_dir=plots_root, run_tag=tag, save_static=save_static, save_html=save_html)
    print(f"[plots] Saving figures under {save_config.run_dir}")
    written = save_report_plots(report, save_config)
    print(f"[plots] Wrote {len(written)} files")


if __name__ == "__main__":
    app()
