"""
Test cases for forecast accuracy metrics, including MAPE on known data, perfect predictions, zero actual values and mismatched lengths.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import pytest

from engine.accuracy import calculate_mape, calculate_prediction_accuracy
from engine.enums import ErrorKind
from engine.errors import PredictionInputError


def test_mape_known_dataset():
    assert calculate_mape([100, 200, 300, 400, 500], [95, 210, 285, 420, 480]) == pytest.approx(4.8)


def test_mape_zero_actual_is_infinite():
    assert math.isinf(calculate_mape([0, 10], [1, 10]))


def test_perfect_predictions():
    vals = [10, 20, 30, 40, 50]
    m = calculate_prediction_accuracy(vals, vals)
    assert (m.mape, m.rmse, m.mae, m.accuracy) == (0, 0, 0, 100)


def test_imperfect_predictions():
    m = calculate_prediction_accuracy([10, 20, 30, 40, 50], [12, 18, 32, 38, 52])
    assert m.mape > 0 and m.rmse == pytest.approx(2.0) and m.mae == pytest.approx(2.0)
    assert m.accuracy == pytest.approx(100 - m.mape)
    assert 0 < m.accuracy <= 100


def test_accuracy_bounded_for_terrible_forecasts():
    m = calculate_prediction_accuracy([1, 2, 3], [100, 200, 300])
    assert m.accuracy == 0


def test_zero_actual_uses_range_normalized_rmse():
    m = calculate_prediction_accuracy([0, 10], [1, 10])
    assert math.isinf(m.mape)
    expected = (1 - math.sqrt(0.5) / 10) * 100
    assert m.accuracy == pytest.approx(expected)


def test_empty_is_perfect():
    m = calculate_prediction_accuracy([], [])
    assert m.accuracy == 100 and m.rmse == 0


@pytest.mark.parametrize("fn", [calculate_mape, calculate_prediction_accuracy])
def test_length_mismatch(fn):
    with pytest.raises(PredictionInputError) as exc:
        fn([1, 2, 3], [1, 2])
    assert exc.value.kind is ErrorKind.length_mismatch


def test_non_finite_rejected():
    with pytest.raises(PredictionInputError) as exc:
        calculate_prediction_accuracy([1, float("nan")], [1, 2])
    assert exc.value.kind is ErrorKind.non_finite_value
