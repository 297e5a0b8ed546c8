"""
Constants and configuration for Vitalcast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict

from pydantic_settings import BaseSettings


ALGORITHM_LINEAR_REGRESSION = "linear-regression"
ALGORITHM_MOVING_AVERAGE = "moving-average"

DISTRIBUTION_NORMAL = "normal"
DISTRIBUTION_STUDENT_T = "student_t"

VITALCAST_DEFAULT_ALGORITHM = os.getenv("VITALCAST_DEFAULT_ALGORITHM", ALGORITHM_LINEAR_REGRESSION).lower()
VITALCAST_DEFAULT_HORIZON = int(os.getenv("VITALCAST_DEFAULT_HORIZON", "7"))
VITALCAST_CONFIDENCE_LEVEL = float(os.getenv("VITALCAST_CONFIDENCE_LEVEL", "0.95"))
VITALCAST_CONFIDENCE_DISTRIBUTION = os.getenv("VITALCAST_CONFIDENCE_DISTRIBUTION", DISTRIBUTION_NORMAL).lower()

# accuracy badge bands used by chart consumers
ACCURACY_BANDS: Dict[str, float] = {
    "good": 80.0,
    "fair": 60.0,
}


class Settings(BaseSettings):
    prediction_default_algorithm: str = VITALCAST_DEFAULT_ALGORITHM
    prediction_default_horizon: int = VITALCAST_DEFAULT_HORIZON
    prediction_max_horizon: int = 365
    # fewer historical points than this and no forecast is attempted
    prediction_min_samples: int = 3
    prediction_confidence_level: float = VITALCAST_CONFIDENCE_LEVEL
    prediction_round_precision: int = 2
    prediction_clamp_non_negative: bool = True

    moving_average_window: int = 3

    # "normal" keeps the interval consistent with the n-denominator residual std
    confidence_distribution: str = VITALCAST_CONFIDENCE_DISTRIBUTION

    trend_neutral_threshold_pct: float = 1.0
    trend_round_precision: int = 2

    accuracy_max: float = 100.0
    backtest_default_holdout: int = 3

    model_config = {
        "env_prefix": "VITALCAST_",
        "extra": "ignore",
    }


settings = Settings()
