"""
Simple moving average over a trailing window, plus the one-step residual spread used to size moving-average forecast bands.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from engine.enums import ErrorKind
from engine.errors import PredictionInputError

log = logging.getLogger(__name__)


def _check_window(window_size: int) -> None:
    if isinstance(window_size, bool) or not isinstance(window_size, (int, np.integer)) or window_size <= 0:
        raise PredictionInputError(
            ErrorKind.invalid_argument,
            f"Window size must be a positive integer, got {window_size!r}",
        )


def moving_average(values: Sequence[float], window_size: int) -> List[float]:
    _check_window(window_size)
    if window_size > len(values):
        log.debug("moving_average: window %d larger than series of %d", window_size, len(values))
        return []

    arr = np.asarray(values, dtype=float)
    windows = np.lib.stride_tricks.sliding_window_view(arr, window_size)
    means = np.clip(windows.mean(axis=1), windows.min(axis=1), windows.max(axis=1))
    return [float(m) for m in means]


def trailing_residual_std(values: Sequence[float], window_size: int) -> float:
    """Spread of each value around the mean of the window just before it.

    Falls back to the population std of ``values`` when the series is too
    short to produce a single one-step residual.
    """
    _check_window(window_size)
    arr = np.asarray(values, dtype=float)
    if len(arr) == 0:
        return 0.0
    if len(arr) <= window_size:
        return float(np.std(arr))

    means = np.array(moving_average(arr[:-1], window_size))
    residuals = arr[window_size:] - means
    return float(np.sqrt(np.mean(residuals ** 2)))
