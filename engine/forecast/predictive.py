"""
Series-to-prediction transform for health trend charts, returning the validated historical series followed by a horizon of dated forecast points from either a linear regression or a compounding moving average, each with a confidence band.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import List, Optional, Sequence, Tuple

import numpy as np

from config import settings
from engine.confidence.interval import ConfidenceIntervalConfig, generate_confidence_interval
from engine.enums import ErrorKind, PredictionAlgorithm
from engine.errors import PredictionInputError
from engine.forecast.series import EntryLike, TimeSeriesEntry, parse_date, to_regression_points, validate_series
from engine.regression.linear import linear_regression
from engine.smoothing.moving_average import trailing_residual_std

log = logging.getLogger(__name__)

# (value, lower, upper) for one forecast step before rounding and clamping
_Raw = Tuple[float, float, float]


@dataclass(frozen=True)
class PredictedDataPoint:
    date: str
    value: float
    is_prediction: bool
    unit: Optional[str] = None
    confidence_upper: Optional[float] = None
    confidence_lower: Optional[float] = None
    algorithm: Optional[PredictionAlgorithm] = None


def resolve_horizon(horizon: int | None) -> int:
    if horizon is None:
        horizon = settings.prediction_default_horizon
    if isinstance(horizon, bool) or not isinstance(horizon, (int, np.integer)) or horizon <= 0:
        raise PredictionInputError(
            ErrorKind.invalid_argument,
            f"Prediction horizon must be a positive integer, got {horizon!r}",
        )
    return int(horizon)


def _linear_steps(entries: Sequence[TimeSeriesEntry], horizon: int, level: float) -> List[_Raw]:
    fit = linear_regression(to_regression_points(entries))
    n = len(entries)
    out: List[_Raw] = []
    for k in range(horizon):
        x0 = float(n + k)
        value = fit.predict(x0)
        band = generate_confidence_interval(
            value,
            ConfidenceIntervalConfig(
                confidence_level=level,
                residual_standard_deviation=fit.residual_standard_deviation,
                sample_size=n,
                leverage=fit.leverage(x0),
            ),
        )
        out.append((value, band.lower, band.upper))
    return out


def _moving_average_steps(values: List[float], horizon: int, level: float, window_size: int) -> List[_Raw]:
    window = min(window_size, len(values))
    spread = trailing_residual_std(values, window)
    buffer = list(values)
    out: List[_Raw] = []
    for step in range(1, horizon + 1):
        # predictions feed back into the window so long horizons settle
        value = float(np.mean(buffer[-window:]))
        buffer.append(value)
        band = generate_confidence_interval(
            value,
            ConfidenceIntervalConfig(
                confidence_level=level,
                residual_standard_deviation=spread,
                sample_size=window,
                leverage=float(step - 1),
            ),
        )
        out.append((value, band.lower, band.upper))
    return out


def _finish(raw: _Raw) -> _Raw:
    value, lower, upper = raw
    if settings.prediction_clamp_non_negative:
        # a band pushed up against zero keeps its full width
        width = upper - lower
        value = max(0.0, value)
        lower = max(0.0, lower)
        upper = max(upper, lower + width)
    p = settings.prediction_round_precision
    return round(value, p), round(lower, p), round(upper, p)


def transform_to_predictive_data(
    series: Sequence[EntryLike],
    algorithm: str | PredictionAlgorithm | None = None,
    horizon: int | None = None,
    confidence_level: float | None = None,
    window_size: int | None = None,
) -> List[PredictedDataPoint]:
    entries = validate_series(series)
    algo = PredictionAlgorithm.parse(algorithm)
    steps = resolve_horizon(horizon)
    if confidence_level is None:
        confidence_level = settings.prediction_confidence_level
    if window_size is None:
        window_size = settings.moving_average_window

    historical = [
        PredictedDataPoint(date=e.date, value=float(e.value), is_prediction=False, unit=e.unit)
        for e in entries
    ]
    if len(entries) < settings.prediction_min_samples:
        log.debug(
            "transform_to_predictive_data: %d points below minimum %d, no forecast",
            len(entries), settings.prediction_min_samples,
        )
        return historical

    values = [float(e.value) for e in entries]
    if algo is PredictionAlgorithm.linear_regression:
        raw = _linear_steps(entries, steps, confidence_level)
    else:
        raw = _moving_average_steps(values, steps, confidence_level, window_size)

    last = parse_date(entries[-1].date, len(entries) - 1)
    unit = entries[0].unit
    predictions: List[PredictedDataPoint] = []
    for k, step in enumerate(raw, start=1):
        value, lower, upper = _finish(step)
        predictions.append(
            PredictedDataPoint(
                date=(last + timedelta(days=k)).isoformat(),
                value=value,
                is_prediction=True,
                unit=unit,
                confidence_upper=upper,
                confidence_lower=lower,
                algorithm=algo,
            )
        )
    return historical + predictions
