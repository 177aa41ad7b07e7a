"""Log-linear model of publication growth: ``log(total_books) ~ publication_year``."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import numpy as np

from bookstats.metrics.aggregation import AggregateRow

from .base import ArrayLike
from .linear import LinearModelConfig, LinearModeler
from .records import RegressionModel

DEFAULT_CUTOFF_YEAR = 2006
PREDICTOR = "publication_year"
RESPONSE = "total_books"


def growth_points(year_rows: Iterable[AggregateRow], cutoff_year: Optional[int] = DEFAULT_CUTOFF_YEAR) -> List[AggregateRow]:
    """Per-year rows up to and including ``cutoff_year``, ordered by year."""
    kept = [row for row in year_rows if cutoff_year is None or int(row.key) <= cutoff_year]
    return sorted(kept, key=lambda row: int(row.key))


def fit_growth_model(
    year_rows: Sequence[AggregateRow],
    cutoff_year: Optional[int] = DEFAULT_CUTOFF_YEAR,
) -> RegressionModel:
    """Fit exponential growth of yearly book counts up to the cutoff year.

    Args:
        year_rows: Output of ``year_counts`` (key = year, count = books that year).
        cutoff_year: Last year included in the fit; ``None`` uses every year.

    Returns:
        RegressionModel on the log scale.

    Raises:
        InsufficientDataError: fewer than two years survive the cutoff.
    """
    points = growth_points(year_rows, cutoff_year)
    years = [int(row.key) for row in points]
    counts = [row.count for row in points]
    modeler = LinearModeler(LinearModelConfig(predictor=PREDICTOR, response=RESPONSE, log_response=True))
    modeler.fit(years, counts)
    return modeler.fitted_model


def predict_book_counts(model: RegressionModel, years: ArrayLike) -> np.ndarray:
    """Exponentiate log-scale predictions back into book counts."""
    if not model.log_response:
        raise RuntimeError("predict_book_counts expects a log-linear growth model.")
    return np.exp(model.predict(years))


__all__ = ["DEFAULT_CUTOFF_YEAR", "fit_growth_model", "growth_points", "predict_book_counts"]
