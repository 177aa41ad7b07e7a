"""Array conversion helpers shared across modelers."""

from __future__ import annotations

import numpy as np

from bookstats.errors import InsufficientDataError

from .base import ArrayLike


def ensure_1d_array(values: ArrayLike, *, name: str) -> np.ndarray:
    """Coerce values into a finite float64 array of shape (n_samples,)."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1-D (batch,), got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite entries.")
    return arr


def ensure_fit_inputs(predictor: ArrayLike, response: ArrayLike, min_distinct: int = 2) -> tuple[np.ndarray, np.ndarray]:
    """Validate paired observations, rejecting inputs too small to fit a line."""
    x = np.asarray(predictor, dtype=np.float64)
    if x.size == 0:
        raise InsufficientDataError("Cannot fit a regression on an empty dataset.")
    x = ensure_1d_array(x, name="predictor")
    y = ensure_1d_array(response, name="response")
    if x.shape[0] != y.shape[0]:
        raise ValueError(f"predictor and response must align, got {x.shape[0]} and {y.shape[0]} values.")

    distinct = np.unique(x).size
    if distinct < min_distinct:
        raise InsufficientDataError(
            f"Need at least {min_distinct} distinct predictor values to fit, received {distinct}."
        )
    return x, y


def as_column(values: np.ndarray) -> np.ndarray:
    """Reshape a 1-D array into the (n_samples, 1) matrix scikit-learn expects."""
    return values.reshape(-1, 1)
