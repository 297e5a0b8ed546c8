"""
Enumerations for Prediction Algorithms, Trend Directions, and Input Error Kinds

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from config import ALGORITHM_LINEAR_REGRESSION, ALGORITHM_MOVING_AVERAGE


class PredictionAlgorithm(str, Enum):
    linear_regression = ALGORITHM_LINEAR_REGRESSION
    moving_average = ALGORITHM_MOVING_AVERAGE

    @classmethod
    def parse(cls, value: str | PredictionAlgorithm | None) -> PredictionAlgorithm:
        # default is read lazily so tests can override it through settings
        from config import settings
        from engine.errors import PredictionInputError

        if value is None:
            value = settings.prediction_default_algorithm
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise PredictionInputError(
                ErrorKind.invalid_argument,
                f"Unknown prediction algorithm: {value!r}",
            ) from None


class TrendDirection(str, Enum):
    up = "up"
    down = "down"
    neutral = "neutral"


class ErrorKind(str, Enum):
    invalid_date = "invalid-date"
    non_finite_value = "non-finite-value"
    length_mismatch = "length-mismatch"
    empty_input = "empty-input"
    invalid_argument = "invalid-argument"
