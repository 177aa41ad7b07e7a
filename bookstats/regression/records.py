"""Fitted model records returned by the regression modelers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping

import numpy as np

from .base import ArrayLike
from .helpers import ensure_1d_array

INTERCEPT = "intercept"


@dataclass(frozen=True)
class FitStatistics:
    """Goodness of fit and per-term inference for an OLS fit."""

    r_squared: float
    std_error: float
    n_obs: int
    coef_std_errors: Mapping[str, float] = field(default_factory=dict)
    t_values: Mapping[str, float] = field(default_factory=dict)
    p_values: Mapping[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class RegressionModel:
    """Single-predictor linear model ``response ~ intercept + slope * predictor``."""

    predictor: str
    response: str
    coefficients: Dict[str, float]
    intercept: float
    statistics: FitStatistics
    log_response: bool = False

    @property
    def slope(self) -> float:
        return self.coefficients[self.predictor]

    @property
    def r_squared(self) -> float:
        return self.statistics.r_squared

    def predict(self, predictor: ArrayLike) -> np.ndarray:
        """Predict on the fitted scale (log scale for log-linear models); extrapolation is not clipped."""
        x = ensure_1d_array(predictor, name="predictor")
        return self.intercept + self.slope * x

    def predict_one(self, value: float) -> float:
        return float(self.predict([value])[0])

    def summary(self) -> str:
        lines = [f"{self.response} ~ {self.predictor}  (n={self.statistics.n_obs}, R²={self.r_squared:.4f})"]
        for term, estimate in ((INTERCEPT, self.intercept), (self.predictor, self.slope)):
            se = self.statistics.coef_std_errors.get(term, float("nan"))
            t = self.statistics.t_values.get(term, float("nan"))
            p = self.statistics.p_values.get(term, float("nan"))
            lines.append(f"  {term:<20} {estimate:>12.6f}  se={se:.6f}  t={t:.3f}  p={p:.4g}")
        lines.append(f"  residual std error   {self.statistics.std_error:.6f}")
        return "\n".join(lines)
