"""
Test cases for trailing moving averages and the one-step residual spread.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.enums import ErrorKind
from engine.errors import PredictionInputError
from engine.smoothing import moving_average, trailing_residual_std


def test_known_sequence():
    assert moving_average(list(range(1, 11)), 3) == [2, 3, 4, 5, 6, 7, 8, 9]


def test_pairs_and_constant():
    assert moving_average([10, 20, 30, 40, 50], 2) == pytest.approx([15, 25, 35, 45])
    assert moving_average([5, 5, 5, 5, 5], 3) == pytest.approx([5, 5, 5])


def test_output_within_window_range():
    vals = [3.0, 9.5, -2.0, 7.25, 0.0, 11.0, 4.0]
    w = 3
    out = moving_average(vals, w)
    assert len(out) == len(vals) - w + 1
    for i, m in enumerate(out):
        window = vals[i:i + w]
        assert min(window) <= m <= max(window)


def test_window_larger_than_series_is_empty():
    assert moving_average([1, 2], 5) == []


@pytest.mark.parametrize("w", [0, -1, 2.5, True])
def test_bad_window_rejected(w):
    with pytest.raises(PredictionInputError) as exc:
        moving_average([1, 2, 3], w)
    assert exc.value.kind is ErrorKind.invalid_argument


def test_residual_std():
    # each value after the first window sits 2 above the mean of the previous three
    assert trailing_residual_std([1, 2, 3, 4, 5, 6], 3) == pytest.approx(2.0)
    assert trailing_residual_std([2, 4], 3) == pytest.approx(1.0)
    assert trailing_residual_std([], 3) == 0.0


def test_mean_never_leaves_window_through_rounding():
    assert moving_average([0.1, 0.1, 0.1], 3) == [0.1]
    assert all(m == 0.7 for m in moving_average([0.7] * 6, 4))
