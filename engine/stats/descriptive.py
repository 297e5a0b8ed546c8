"""
Population mean, variance and covariance over plain numeric sequences, returning zero for empty input so callers can treat "no data" as "no spread".

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def calculate_mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def calculate_variance(values: Sequence[float], mean: float | None = None) -> float:
    if len(values) == 0:
        return 0.0
    arr = np.asarray(values, dtype=float)
    m = float(np.mean(arr)) if mean is None else mean
    return float(np.mean((arr - m) ** 2))


def calculate_covariance(
    x_values: Sequence[float],
    y_values: Sequence[float],
    x_mean: float | None = None,
    y_mean: float | None = None,
) -> float:
    if len(x_values) != len(y_values) or len(x_values) == 0:
        return 0.0
    x = np.asarray(x_values, dtype=float)
    y = np.asarray(y_values, dtype=float)
    mx = float(np.mean(x)) if x_mean is None else x_mean
    my = float(np.mean(y)) if y_mean is None else y_mean
    return float(np.mean((x - mx) * (y - my)))
