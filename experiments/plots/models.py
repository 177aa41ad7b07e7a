"""Charts overlaying fitted regression lines on their observations."""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from bookstats.datahub.records import BookRecord
from bookstats.metrics.aggregation import AggregateRow
from bookstats.regression.records import RegressionModel

from .save_config import PlotSaveDestinations, emit_figure


def plot_growth(
    years: Sequence[AggregateRow],
    model: Optional[RegressionModel],
    forecast: Mapping[int, float],
    save_to: Optional[PlotSaveDestinations] = None,
) -> List[Path]:
    """Books per year (log axis) with the fitted growth curve and its forecast."""
    if not years:
        return []

    df = pd.DataFrame({"year": [int(row.key) for row in years], "books": [row.count for row in years]})
    fig = px.scatter(
        df,
        x="year",
        y="books",
        log_y=True,
        title="Books published per year",
        labels={"year": "Publication year", "books": "Books"},
    )
    if model is not None:
        span = np.arange(df["year"].min(), max([df["year"].max(), *forecast.keys()]) + 1)
        fig.add_trace(go.Scatter(x=span, y=np.exp(model.predict(span)), mode="lines", name="log-linear fit"))
    if forecast:
        fig.add_trace(
            go.Scatter(
                x=list(forecast.keys()),
                y=list(forecast.values()),
                mode="markers",
                marker_symbol="x",
                name="forecast",
            )
        )
    return emit_figure(fig, save_to)


def plot_author_model(
    books: Sequence[BookRecord],
    model: Optional[RegressionModel],
    author: str,
    save_to: Optional[PlotSaveDestinations] = None,
) -> List[Path]:
    if not books:
        return []

    df = pd.DataFrame(
        {
            "pages": [book.pages for book in books],
            "rating": [book.rating for book in books],
            "title": [book.title for book in books],
        }
    )
    fig = px.scatter(
        df,
        x="pages",
        y="rating",
        hover_name="title",
        title=f"{author} – rating vs. page count",
        labels={"pages": "Pages", "rating": "Average rating"},
    )
    if model is not None:
        span = np.linspace(df["pages"].min(), df["pages"].max(), num=50)
        fig.add_trace(go.Scatter(x=span, y=model.predict(span), mode="lines", name=f"R²={model.r_squared:.3f}"))
    return emit_figure(fig, save_to)


def plot_publisher_ratings(
    records: Sequence[BookRecord],
    publishers: Sequence[str],
    save_to: Optional[PlotSaveDestinations] = None,
) -> List[Path]:
    """Box plot of ratings for the given publishers."""
    selected = [record for record in records if record.publisher in publishers]
    if not selected:
        return []

    df = pd.DataFrame(
        {
            "publisher": [record.publisher for record in selected],
            "rating": [record.rating for record in selected],
        }
    )
    fig = px.box(
        df,
        x="publisher",
        y="rating",
        category_orders={"publisher": list(publishers)},
        title="Rating distribution of the most prolific publishers",
        labels={"publisher": "Publisher", "rating": "Average rating"},
    )
    return emit_figure(fig, save_to)


__all__ = ["plot_author_model", "plot_growth", "plot_publisher_ratings"]
