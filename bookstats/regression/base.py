"""Common modeler interfaces and shared typing aliases."""

from __future__ import annotations

from typing import Protocol, Sequence, Union

import numpy as np

ArrayLike = Union[np.ndarray, Sequence[float]]


class BaseModeler(Protocol):
    """Protocol describing the minimal surface area for single-predictor modelers."""

    def fit(self, predictor: ArrayLike, response: ArrayLike) -> "BaseModeler": ...

    def predict(self, predictor: ArrayLike) -> np.ndarray: ...
