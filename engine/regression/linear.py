"""
Linear regression logic for health metric series, fitting an ordinary least squares line through (x, y) points and reporting goodness of fit and residual spread for use by confidence bands.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from engine.enums import ErrorKind
from engine.errors import PredictionInputError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float


@dataclass(frozen=True)
class RegressionResult:
    slope: float
    intercept: float
    r_squared: float
    residual_standard_deviation: float
    x_mean: float = 0.0
    sxx: float = 0.0
    sample_size: int = 0

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept

    def leverage(self, x: float) -> float:
        """Squared distance of ``x`` from the fitted x mean, scaled by Sxx.

        Zero when x had no spread, so the interval falls back to the flat
        ``sqrt(1 + 1/n)`` form.
        """
        if self.sxx <= 0:
            return 0.0
        return (x - self.x_mean) ** 2 / self.sxx


def linear_regression(points: Sequence[DataPoint]) -> RegressionResult:
    if len(points) == 0:
        raise PredictionInputError(ErrorKind.empty_input, "Linear regression requires at least 1 data point")

    x = np.array([p.x for p in points], dtype=float)
    y = np.array([p.y for p in points], dtype=float)
    n = len(x)

    x_mean = float(np.mean(x))
    y_mean = float(np.mean(y))
    dx = x - x_mean
    dy = y - y_mean
    sxx = float(np.sum(dx ** 2))

    if sxx == 0:
        log.debug("linear_regression: zero variance in x over %d points", n)
        return RegressionResult(
            slope=0.0,
            intercept=y_mean,
            r_squared=0.0,
            residual_standard_deviation=float(np.sqrt(np.mean(dy ** 2))),
            x_mean=x_mean,
            sxx=0.0,
            sample_size=n,
        )

    slope = float(np.sum(dx * dy)) / sxx
    intercept = y_mean - slope * x_mean

    residuals = y - (slope * x + intercept)
    ss_res = float(np.sum(residuals ** 2))
    ss_tot = float(np.sum(dy ** 2))

    # a flat y over varying x is fitted exactly by a zero slope
    r2 = 1.0 if ss_tot == 0 else 1.0 - ss_res / ss_tot

    return RegressionResult(
        slope=slope,
        intercept=intercept,
        r_squared=max(0.0, min(1.0, r2)),
        residual_standard_deviation=float(np.sqrt(ss_res / n)),
        x_mean=x_mean,
        sxx=sxx,
        sample_size=n,
    )
