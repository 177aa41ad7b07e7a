"""Ordinary least squares with a single predictor: scikit-learn fit, statsmodels inference."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import statsmodels.api as sm
from sklearn.linear_model import LinearRegression

from .base import ArrayLike, BaseModeler
from .helpers import as_column, ensure_fit_inputs
from .records import INTERCEPT, FitStatistics, RegressionModel


@dataclass
class LinearModelConfig:
    predictor: str = "x"
    response: str = "y"
    log_response: bool = False
    min_distinct: int = 2

    def validate(self) -> None:
        if self.min_distinct < 2:
            raise ValueError("A line needs at least two distinct predictor values.")


class LinearModeler(BaseModeler):
    """Fits ``response ~ predictor`` (optionally on ``log(response)``) and exposes the fitted model."""

    def __init__(self, config: Optional[LinearModelConfig] = None) -> None:
        self.config = config or LinearModelConfig()
        self.model: Optional[RegressionModel] = None

    def fit(self, predictor: ArrayLike, response: ArrayLike) -> "LinearModeler":
        self.config.validate()
        x, y = ensure_fit_inputs(predictor, response, self.config.min_distinct)
        if self.config.log_response:
            if np.any(y <= 0):
                raise ValueError("log-linear fits require strictly positive responses.")
            y = np.log(y)

        X = as_column(x)
        estimator = LinearRegression(fit_intercept=True)
        estimator.fit(X, y)
        slope = float(estimator.coef_[0])
        intercept = float(estimator.intercept_)
        r_squared = float(estimator.score(X, y))

        self.model = RegressionModel(
            predictor=self.config.predictor,
            response=self._response_label(),
            coefficients={self.config.predictor: slope},
            intercept=intercept,
            statistics=_fit_statistics(x, y, r_squared, self.config.predictor),
            log_response=self.config.log_response,
        )
        return self

    @property
    def fitted_model(self) -> RegressionModel:
        return self._require_model()

    def predict(self, predictor: ArrayLike) -> np.ndarray:
        return self._require_model().predict(predictor)

    def _response_label(self) -> str:
        if self.config.log_response:
            return f"log({self.config.response})"
        return self.config.response

    def _require_model(self) -> RegressionModel:
        if self.model is None:
            raise RuntimeError("LinearModeler has not been fitted yet.")
        return self.model


def _fit_statistics(x: np.ndarray, y: np.ndarray, r_squared: float, predictor: str) -> FitStatistics:
    """Per-term inference from statsmodels OLS; with two points every error term is undefined (NaN)."""
    n_obs = int(x.shape[0])
    terms = (INTERCEPT, predictor)
    if n_obs <= 2:
        undefined = {term: float("nan") for term in terms}
        return FitStatistics(
            r_squared=r_squared,
            std_error=float("nan"),
            n_obs=n_obs,
            coef_std_errors=dict(undefined),
            t_values=dict(undefined),
            p_values=dict(undefined),
        )

    # exact fits give zero standard errors and infinite t-values
    with np.errstate(divide="ignore", invalid="ignore"):
        results = sm.OLS(y, sm.add_constant(x, has_constant="add")).fit()
        std_errors = np.asarray(results.bse, dtype=float)
        t_values = np.asarray(results.tvalues, dtype=float)
        p_values = np.asarray(results.pvalues, dtype=float)

    return FitStatistics(
        r_squared=r_squared,
        std_error=float(np.sqrt(results.scale)),
        n_obs=n_obs,
        coef_std_errors=dict(zip(terms, map(float, std_errors))),
        t_values=dict(zip(terms, map(float, t_values))),
        p_values=dict(zip(terms, map(float, p_values))),
    )


__all__ = ["LinearModelConfig", "LinearModeler"]
