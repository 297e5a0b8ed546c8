"""
Prediction summaries for health charts, bundling forecast points with an algorithm-specific fit score, and holdout backtesting that measures forecast accuracy against the last observed values.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import List, Sequence

from config import ACCURACY_BANDS, settings
from engine.accuracy.metrics import AccuracyMetrics, calculate_prediction_accuracy
from engine.enums import ErrorKind, PredictionAlgorithm
from engine.errors import PredictionInputError
from engine.forecast.predictive import PredictedDataPoint, transform_to_predictive_data
from engine.forecast.series import EntryLike, TimeSeriesEntry, to_regression_points, validate_series
from engine.regression.linear import linear_regression
from engine.stats.descriptive import calculate_mean


@dataclass(frozen=True)
class PredictionResult:
    points: List[PredictedDataPoint]
    predictions: List[PredictedDataPoint]
    accuracy: float
    algorithm: PredictionAlgorithm
    confidence_level: float


def accuracy_band(accuracy: float) -> str:
    if accuracy >= ACCURACY_BANDS["good"]:
        return "good"
    if accuracy >= ACCURACY_BANDS["fair"]:
        return "fair"
    return "poor"


def _fit_accuracy(entries: Sequence[TimeSeriesEntry], algo: PredictionAlgorithm, window_size: int) -> float:
    if algo is PredictionAlgorithm.linear_regression:
        return linear_regression(to_regression_points(entries)).r_squared * settings.accuracy_max

    recent = [float(e.value) for e in entries[-min(window_size, len(entries)):]]
    avg = calculate_mean(recent)
    if avg == 0:
        return 0.0
    avg_error = calculate_mean([abs(v - avg) for v in recent])
    return max(0.0, min(settings.accuracy_max, (1.0 - avg_error / abs(avg)) * settings.accuracy_max))


def predict(
    series: Sequence[EntryLike],
    algorithm: str | PredictionAlgorithm | None = None,
    horizon: int | None = None,
    confidence_level: float | None = None,
    window_size: int | None = None,
) -> PredictionResult:
    entries = validate_series(series)
    algo = PredictionAlgorithm.parse(algorithm)
    if confidence_level is None:
        confidence_level = settings.prediction_confidence_level
    if window_size is None:
        window_size = settings.moving_average_window

    points = transform_to_predictive_data(entries, algo, horizon, confidence_level, window_size)
    predictions = [p for p in points if p.is_prediction]
    accuracy = _fit_accuracy(entries, algo, window_size) if predictions else 0.0

    return PredictionResult(
        points=points,
        predictions=predictions,
        accuracy=round(accuracy, settings.prediction_round_precision),
        algorithm=algo,
        confidence_level=confidence_level,
    )


def backtest(
    series: Sequence[EntryLike],
    algorithm: str | PredictionAlgorithm | None = None,
    holdout: int | None = None,
    window_size: int | None = None,
) -> AccuracyMetrics:
    entries = validate_series(series)
    if holdout is None:
        holdout = settings.backtest_default_holdout
    if isinstance(holdout, bool) or not isinstance(holdout, numbers.Integral) or holdout <= 0:
        raise PredictionInputError(
            ErrorKind.invalid_argument,
            f"Backtest holdout must be a positive integer, got {holdout!r}",
        )
    holdout = int(holdout)
    train = entries[:-holdout]
    if len(train) < settings.prediction_min_samples:
        raise PredictionInputError(
            ErrorKind.invalid_argument,
            f"Backtest needs at least {settings.prediction_min_samples} training points "
            f"before a holdout of {holdout}, got {len(entries)} entries",
        )

    forecast = transform_to_predictive_data(train, algorithm, holdout, window_size=window_size)
    predicted = [p.value for p in forecast if p.is_prediction]
    actual = [float(e.value) for e in entries[-holdout:]]
    return calculate_prediction_accuracy(actual, predicted)
