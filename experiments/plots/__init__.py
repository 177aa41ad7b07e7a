"""Plotting utilities for catalog analysis results."""

from .models import plot_author_model, plot_growth, plot_publisher_ratings
from .rankings import plot_rating_distribution, plot_ranking, rows_to_frame
from .save_config import PlotSaveConfig, PlotSaveDestinations, emit_figure

__all__ = [
    "PlotSaveConfig",
    "PlotSaveDestinations",
    "emit_figure",
    "plot_author_model",
    "plot_growth",
    "plot_publisher_ratings",
    "plot_rating_distribution",
    "plot_ranking",
    "rows_to_frame",
]
