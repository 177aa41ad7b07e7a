"""Bar charts for ranked aggregate tables."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd
import plotly.express as px

from bookstats.metrics.aggregation import AggregateRow, MetricName

from .save_config import PlotSaveDestinations, emit_figure

METRIC_LABELS = {
    "count": "Books",
    "sum": "Cumulative rating",
    "mean": "Average rating",
    "min": "Lowest rating",
    "max": "Highest rating",
}


def rows_to_frame(rows: Sequence[AggregateRow], key_label: str = "key") -> pd.DataFrame:
    return pd.DataFrame(
        {
            key_label: [str(row.key) for row in rows],
            "count": [row.count for row in rows],
            "sum": [row.total for row in rows],
            "mean": [row.mean for row in rows],
            "min": [row.minimum for row in rows],
            "max": [row.maximum for row in rows],
        }
    )


def plot_ranking(
    rows: Sequence[AggregateRow],
    metric: MetricName,
    title: str,
    key_label: str,
    save_to: Optional[PlotSaveDestinations] = None,
) -> List[Path]:
    """Horizontal bar chart with the top-ranked group at the top."""
    if not rows:
        return []

    df = rows_to_frame(rows, key_label)
    fig = px.bar(
        df,
        x=metric,
        y=key_label,
        orientation="h",
        title=title,
        labels={metric: METRIC_LABELS[metric], key_label: key_label.capitalize()},
    )
    fig.update_yaxes(autorange="reversed")
    return emit_figure(fig, save_to)


def plot_rating_distribution(
    rows: Sequence[AggregateRow],
    save_to: Optional[PlotSaveDestinations] = None,
) -> List[Path]:
    if not rows:
        return []

    df = pd.DataFrame({"rating": [float(row.key) for row in rows], "books": [row.count for row in rows]})
    fig = px.bar(df, x="rating", y="books", title="Rating distribution", labels={"rating": "Average rating"})
    return emit_figure(fig, save_to)


__all__ = ["METRIC_LABELS", "plot_rating_distribution", "plot_ranking", "rows_to_frame"]
