"""
Trend direction between two consecutive health readings, expressed as an up, down or neutral direction with a rounded absolute percentage change.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from config import settings
from engine.enums import ErrorKind, TrendDirection
from engine.errors import PredictionInputError


@dataclass(frozen=True)
class TrendSummary:
    direction: TrendDirection
    percentage: float


def _check(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise PredictionInputError(ErrorKind.non_finite_value, f"Invalid {name} value: must be a finite number")


def calculate_trend(current: float, previous: float, neutral_threshold: float | None = None) -> TrendSummary:
    if neutral_threshold is None:
        neutral_threshold = settings.trend_neutral_threshold_pct
    _check("current", current)
    _check("previous", previous)

    if previous == 0:
        return TrendSummary(direction=TrendDirection.neutral, percentage=0.0)

    change = (current - previous) / previous * 100.0
    percentage = abs(round(change, settings.trend_round_precision))
    if abs(change) < neutral_threshold:
        return TrendSummary(direction=TrendDirection.neutral, percentage=percentage)
    return TrendSummary(
        direction=TrendDirection.up if change > 0 else TrendDirection.down,
        percentage=percentage,
    )
