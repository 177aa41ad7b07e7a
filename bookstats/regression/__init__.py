"""Single-predictor regression modelers."""

from .author import DEFAULT_NON_BOOK_PATTERN, author_bibliography, fit_author_model
from .base import ArrayLike, BaseModeler
from .growth import DEFAULT_CUTOFF_YEAR, fit_growth_model, growth_points, predict_book_counts
from .linear import LinearModelConfig, LinearModeler
from .records import FitStatistics, RegressionModel

__all__ = [
    "ArrayLike",
    "BaseModeler",
    "DEFAULT_CUTOFF_YEAR",
    "DEFAULT_NON_BOOK_PATTERN",
    "FitStatistics",
    "LinearModelConfig",
    "LinearModeler",
    "RegressionModel",
    "author_bibliography",
    "fit_author_model",
    "fit_growth_model",
    "growth_points",
    "predict_book_counts",
]
