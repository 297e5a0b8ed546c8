"""
Forecasting logic for health metric series, including validation of dated entries, linear regression and moving average projections with confidence bands, prediction summaries with backtesting, and trend direction between readings.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.series import TimeSeriesEntry, parse_date, validate_series
from engine.forecast.predictive import PredictedDataPoint, transform_to_predictive_data
from engine.forecast.summary import PredictionResult, accuracy_band, backtest, predict
from engine.forecast.trend import TrendSummary, calculate_trend

__all__ = [
    "TimeSeriesEntry",
    "parse_date",
    "validate_series",
    "PredictedDataPoint",
    "transform_to_predictive_data",
    "PredictionResult",
    "accuracy_band",
    "backtest",
    "predict",
    "TrendSummary",
    "calculate_trend",
]
