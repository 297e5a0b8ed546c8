"""
Confidence interval generation for predicted values, scaling the residual standard deviation by a normal (or optionally Student t) critical value and a sample-size correction, with an optional leverage term so bands widen with forecast distance.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from scipy import stats

from config import DISTRIBUTION_NORMAL, DISTRIBUTION_STUDENT_T, settings
from engine.enums import ErrorKind
from engine.errors import PredictionInputError


@dataclass(frozen=True)
class ConfidenceIntervalConfig:
    confidence_level: float
    residual_standard_deviation: float
    sample_size: int
    leverage: float = 0.0


@dataclass(frozen=True)
class ConfidenceInterval:
    lower: float
    upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower


def _validate(config: ConfidenceIntervalConfig) -> None:
    if not 0.0 < config.confidence_level < 1.0:
        raise PredictionInputError(
            ErrorKind.invalid_argument,
            f"Confidence level must be in (0, 1), got {config.confidence_level}",
        )
    if not math.isfinite(config.residual_standard_deviation) or config.residual_standard_deviation < 0:
        raise PredictionInputError(
            ErrorKind.invalid_argument,
            f"Residual standard deviation must be finite and >= 0, got {config.residual_standard_deviation}",
        )
    if int(config.sample_size) != config.sample_size or config.sample_size <= 0:
        raise PredictionInputError(
            ErrorKind.invalid_argument,
            f"Sample size must be a positive integer, got {config.sample_size}",
        )
    if config.leverage < 0:
        raise PredictionInputError(
            ErrorKind.invalid_argument,
            f"Leverage must be >= 0, got {config.leverage}",
        )


def critical_value(confidence_level: float, sample_size: int, distribution: str | None = None) -> float:
    if distribution is None:
        distribution = settings.confidence_distribution
    q = 0.5 + confidence_level / 2.0
    if distribution == DISTRIBUTION_STUDENT_T:
        return float(stats.t.ppf(q, max(int(sample_size) - 2, 1)))
    if distribution != DISTRIBUTION_NORMAL:
        raise PredictionInputError(
            ErrorKind.invalid_argument,
            f"Unknown confidence distribution: {distribution!r}",
        )
    return float(stats.norm.ppf(q))


def generate_confidence_interval(
    point_estimate: float,
    config: ConfidenceIntervalConfig,
    distribution: str | None = None,
) -> ConfidenceInterval:
    _validate(config)
    crit = critical_value(config.confidence_level, config.sample_size, distribution)
    margin = crit * config.residual_standard_deviation * math.sqrt(
        1.0 + 1.0 / config.sample_size + config.leverage
    )
    return ConfidenceInterval(lower=point_estimate - margin, upper=point_estimate + margin)
