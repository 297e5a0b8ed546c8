"""
Accuracy metrics for forecasts, including mean absolute percentage error, root mean squared error and mean absolute error, bundled with a bounded 0-100 accuracy score for display.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from config import settings
from engine.enums import ErrorKind
from engine.errors import PredictionInputError


@dataclass(frozen=True)
class AccuracyMetrics:
    mape: float
    rmse: float
    mae: float
    accuracy: float


def _paired(actual: Sequence[float], predicted: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    if len(actual) != len(predicted):
        raise PredictionInputError(
            ErrorKind.length_mismatch,
            f"Actual and predicted values must have the same length ({len(actual)} != {len(predicted)})",
        )
    a = np.asarray(actual, dtype=float)
    p = np.asarray(predicted, dtype=float)
    if not (np.all(np.isfinite(a)) and np.all(np.isfinite(p))):
        raise PredictionInputError(ErrorKind.non_finite_value, "Accuracy inputs must be finite numbers")
    return a, p


def calculate_mape(actual: Sequence[float], predicted: Sequence[float]) -> float:
    """Mean absolute percentage error, as a percentage.

    Returns ``inf`` when any actual value is zero, since the percentage
    error is undefined there.
    """
    a, p = _paired(actual, predicted)
    if len(a) == 0:
        return 0.0
    if np.any(a == 0):
        return math.inf
    return float(np.mean(np.abs((a - p) / a)) * 100.0)


def calculate_prediction_accuracy(actual: Sequence[float], predicted: Sequence[float]) -> AccuracyMetrics:
    a, p = _paired(actual, predicted)
    cap = settings.accuracy_max
    if len(a) == 0:
        return AccuracyMetrics(mape=0.0, rmse=0.0, mae=0.0, accuracy=cap)

    mape = calculate_mape(a, p)
    err = a - p
    rmse = float(np.sqrt(np.mean(err ** 2)))
    mae = float(np.mean(np.abs(err)))

    if math.isfinite(mape):
        accuracy = cap - min(mape, cap)
    else:
        spread = float(np.max(a) - np.min(a))
        if spread > 0:
            normalized = rmse / spread
        else:
            normalized = 0.0 if rmse == 0 else 1.0
        accuracy = max(0.0, min(cap, (1.0 - normalized) * cap))

    return AccuracyMetrics(mape=mape, rmse=rmse, mae=mae, accuracy=accuracy)
