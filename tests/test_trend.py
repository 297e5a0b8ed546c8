"""
Test cases for trend direction and percentage change between readings.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from config import settings
from engine.enums import ErrorKind, TrendDirection
from engine.errors import PredictionInputError
from engine.forecast import calculate_trend


def test_positive_trend():
    t = calculate_trend(110, 100)
    assert t.direction is TrendDirection.up
    assert t.percentage == pytest.approx(10.0)


def test_negative_trend():
    t = calculate_trend(77, 80)
    assert t.direction is TrendDirection.down
    assert t.percentage == pytest.approx(3.75)


def test_small_change_is_neutral():
    t = calculate_trend(100.5, 100)
    assert t.direction is TrendDirection.neutral
    assert t.percentage == pytest.approx(0.5)


def test_zero_previous():
    t = calculate_trend(42, 0)
    assert (t.direction, t.percentage) == (TrendDirection.neutral, 0.0)


def test_threshold_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "trend_neutral_threshold_pct", 20.0)
    assert calculate_trend(110, 100).direction is TrendDirection.neutral
    assert calculate_trend(110, 100, neutral_threshold=5.0).direction is TrendDirection.up


@pytest.mark.parametrize("current,previous", [(float("nan"), 1), (1, float("inf")), ("10", 5)])
def test_non_finite_rejected(current, previous):
    with pytest.raises(PredictionInputError) as exc:
        calculate_trend(current, previous)
    assert exc.value.kind is ErrorKind.non_finite_value
