"""End-to-end tests for the analysis pipeline, figure export and CLI."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest
from typer.testing import CliRunner

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from bookstats.config import AnalysisConfig
from bookstats.pipelines import analyze_catalog, run_analysis
from experiments.catalog_report import print_report, save_report_plots
from experiments.plots import PlotSaveConfig
from main import app


# ---------------------------------------------------------------------------
# Helper fixtures and utilities


def _row(
    title: str,
    year: int,
    authors: str = "Author",
    language_code: str = "eng",
    rating: str = "4.0",
    pages: str = "300",
    publisher: str = "Pub",
) -> dict[str, object]:
    return {
        "bookID": title,
        "title": title,
        "authors": authors,
        "average_rating": rating,
        "isbn": "0",
        "isbn13": "0",
        "language_code": language_code,
        "  num_pages": pages,
        "ratings_count": "10",
        "text_reviews_count": "1",
        "publication_date": f"1/1/{year}",
        "publisher": publisher,
    }


def _doubling_catalog() -> list[dict[str, object]]:
    """Fifteen English books: 1, 2, 4 and 8 published in 2000–2003."""
    rows: list[dict[str, object]] = []
    for year, count in zip(range(2000, 2004), (1, 2, 4, 8)):
        for idx in range(count):
            rows.append(
                _row(
                    f"Book {year}-{idx}",
                    year,
                    authors="Margaret Weis/Tracy Hickman" if idx % 2 else "Weis/Hickman",
                    language_code="en-US" if idx % 3 == 0 else "eng",
                    rating=f"{3.0 + 0.1 * idx:.1f}",
                    pages=str(200 + 50 * idx),
                    publisher="Tor" if idx % 2 else "Ace",
                )
            )
    return rows


def _noisy_rows() -> list[dict[str, object]]:
    return [
        _row("French book", 2001, language_code="fre"),
        _row("Placeholder", 2001, rating="0.0"),
        _row("No title", 2001) | {"title": None},
        _row("Numeric language", 2001, language_code="9780674842113"),
    ]


CSV_HEADER = (
    "bookID,title,authors,average_rating,isbn,isbn13,language_code,  num_pages,"
    "ratings_count,text_reviews_count,publication_date,publisher\n"
)


def _write_catalog(tmp_path: Path, rows: list[dict[str, object]]) -> Path:
    lines = []
    for row in rows:
        values = ["" if value is None else str(value) for value in row.values()]
        lines.append(",".join(values))
    path = tmp_path / "books.csv"
    path.write_text(CSV_HEADER + "\n".join(lines) + "\n", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Pipeline tests


def test_run_analysis_end_to_end() -> None:
    rows = _doubling_catalog() + _noisy_rows()
    report = run_analysis(rows, AnalysisConfig(min_author_books=1, forecast_years=(2004,)))

    assert report.catalog.dropped == 1
    assert report.catalog.total == len(rows)
    assert len(report.filtered) == 15
    assert all(record.language_code == "eng" and record.rating >= 2.5 for record in report.filtered)

    assert [(row.key, row.count) for row in report.years] == [(2000, 1), (2001, 2), (2002, 4), (2003, 8)]
    assert report.growth_model is not None
    assert report.growth_forecast[2004] == pytest.approx(16.0)

    language_keys = [row.key for row in report.languages]
    assert language_keys == ["eng", "fre"]

    assert {row.key for row in report.raw_authors.by_count} == {"Weis/Hickman", "Margaret Weis/Tracy Hickman"}
    assert [(row.key, row.count) for row in report.authors.by_count] == [("Weis/Hickman", 15)]
    assert report.author == "Weis/Hickman"
    assert report.author_model is not None
    assert report.author_model.slope > 0
    assert report.skipped == {}


def test_run_analysis_resolves_requested_author_alias() -> None:
    rows = [
        _row("Dragons of Autumn Twilight", 2000, authors="Margaret Weis/Tracy Hickman", rating="3.9", pages="440"),
        _row("Dragons of Winter Night", 2001, authors="Margaret Weis/Tracy Hickman", rating="4.0", pages="400"),
        _row("Time of the Twins", 2002, authors="Weis/Hickman", rating="4.1", pages="380"),
    ]
    report = run_analysis(rows, AnalysisConfig(author="Margaret Weis/Tracy Hickman"))

    assert report.author == "Weis/Hickman"
    assert len(report.author_books) == 3
    assert report.author_model is not None
    assert report.author_model.statistics.n_obs == 3
    assert "author" not in report.skipped


def test_run_analysis_survives_unparseable_years() -> None:
    rows = _doubling_catalog() + [_row("Odd date", 2001) | {"publication_date": "1/1/200\u00b2"}]
    report = run_analysis(rows, AnalysisConfig(min_author_books=1))

    assert len(report.filtered) == 16
    assert sum(row.count for row in report.years) == 15
    assert report.growth_model is not None


def test_run_analysis_records_skipped_models() -> None:
    rows = [_row("Only book", 2001, authors="Solo")]
    report = run_analysis(rows)

    assert report.growth_model is None
    assert report.growth_forecast == {}
    assert report.author_model is None
    assert set(report.skipped) == {"growth", "author"}


def test_run_analysis_with_nothing_left() -> None:
    report = run_analysis([_row("French book", 2001, language_code="fre")])
    assert report.filtered == ()
    assert report.author is None
    assert "author" in report.skipped


def test_run_analysis_validates_config() -> None:
    with pytest.raises(ValueError):
        run_analysis([], AnalysisConfig(top_n=0))
    with pytest.raises(ValueError):
        run_analysis([], AnalysisConfig(rating_floor=6.0))


def test_rating_floor_is_configurable() -> None:
    rows = [_row("Low", 2001, rating="3.0"), _row("High", 2002, rating="4.5")]
    report = run_analysis(rows, AnalysisConfig(rating_floor=4.0))
    assert [record.title for record in report.filtered] == ["High"]


def test_analyze_catalog_reads_file_and_prints(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_catalog(tmp_path, _doubling_catalog())
    report = analyze_catalog(path, AnalysisConfig(min_author_books=1))
    print_report(report)

    out = capsys.readouterr().out
    assert len(report.filtered) == 15
    assert "Top authors by books" in out
    assert "log(total_books) ~ publication_year" in out


def test_save_report_plots_writes_html(tmp_path: Path) -> None:
    report = run_analysis(_doubling_catalog(), AnalysisConfig(min_author_books=1))
    save_config = PlotSaveConfig(base_dir=tmp_path, run_tag="run", save_static=False, save_html=True)
    written = save_report_plots(report, save_config)

    assert written
    assert all(path.suffix == ".html" and path.exists() for path in written)
    assert (tmp_path / "run" / "growth.html").exists()
    assert (tmp_path / "run" / "author_model.html").exists()


# ---------------------------------------------------------------------------
# CLI tests


def test_cli_growth_command(tmp_path: Path) -> None:
    path = _write_catalog(tmp_path, _doubling_catalog())
    result = CliRunner().invoke(app, ["growth", "--catalog", str(path), "--predict", "2004"])
    assert result.exit_code == 0, result.output
    assert "2004: 16 books" in result.output


def test_cli_author_model_command(tmp_path: Path) -> None:
    path = _write_catalog(tmp_path, _doubling_catalog())
    result = CliRunner().invoke(
        app,
        ["author-model", "--catalog", str(path), "--author", "Weis/Hickman", "--pages", "400"],
    )
    assert result.exit_code == 0, result.output
    assert "rating ~ pages" in result.output
    assert "400 pages" in result.output


def test_cli_author_model_accepts_alternate_byline(tmp_path: Path) -> None:
    path = _write_catalog(tmp_path, _doubling_catalog())
    result = CliRunner().invoke(
        app,
        ["author-model", "--catalog", str(path), "--author", "Margaret Weis/Tracy Hickman"],
    )
    assert result.exit_code == 0, result.output
    assert "n=15" in result.output


def test_cli_author_model_reports_insufficient_data(tmp_path: Path) -> None:
    path = _write_catalog(tmp_path, _doubling_catalog())
    result = CliRunner().invoke(app, ["author-model", "--catalog", str(path), "--author", "Nobody"])
    assert result.exit_code == 1


def test_cli_summary_rejects_bad_config(tmp_path: Path) -> None:
    path = _write_catalog(tmp_path, _doubling_catalog())
    result = CliRunner().invoke(app, ["summary", "--catalog", str(path), "--top", "0"])
    assert result.exit_code != 0


def test_cli_plots_command(tmp_path: Path) -> None:
    path = _write_catalog(tmp_path, _doubling_catalog())
    result = CliRunner().invoke(
        app,
        ["plots", "--catalog", str(path), "--plots-root", str(tmp_path / "plots"), "--plots-tag", "t"],
    )
    assert result.exit_code == 0, result.output
    assert (tmp_path / "plots" / "t" / "languages.html").exists()
