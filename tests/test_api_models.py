"""
Test cases for prediction request and response schemas, covering defaults, aliases, bounds and camelCase chart serialization.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest
from pydantic import ValidationError

from api.requests import BacktestRequest, PredictionRequest
from api.responses import AccuracyResponse, PredictedPointModel
from config import settings
from engine.accuracy import AccuracyMetrics
from engine.enums import PredictionAlgorithm
from engine.forecast import PredictedDataPoint


def test_prediction_request_defaults_and_aliases():
    req = PredictionRequest(series=[{"date": "2024-01-01", "value": 1}])
    assert req.algorithm is PredictionAlgorithm(settings.prediction_default_algorithm)
    assert req.horizon == settings.prediction_default_horizon
    assert req.include_confidence is True

    req = PredictionRequest.model_validate(
        {"series": [], "algorithm": "moving-average", "predictionHorizon": 14, "showConfidenceInterval": False}
    )
    assert req.algorithm is PredictionAlgorithm.moving_average
    assert req.horizon == 14
    assert req.include_confidence is False


@pytest.mark.parametrize(
    "payload",
    [
        {"series": [], "horizon": 0},
        {"series": [], "horizon": 10_000},
        {"series": [], "algorithm": "arima"},
        {"series": [], "confidenceLevel": 1.5},
        {"series": [{"value": 1}]},
    ],
)
def test_prediction_request_rejects(payload):
    with pytest.raises(ValidationError):
        PredictionRequest.model_validate(payload)


def test_backtest_request_requires_series():
    with pytest.raises(ValidationError):
        BacktestRequest()
    assert BacktestRequest(series=[]).holdout == settings.backtest_default_holdout


def test_point_serializes_camel_case():
    point = PredictedDataPoint(
        date="2024-01-06",
        value=8440.0,
        is_prediction=True,
        unit="steps",
        confidence_upper=8600.5,
        confidence_lower=8279.5,
        algorithm=PredictionAlgorithm.linear_regression,
    )
    body = PredictedPointModel.from_point(point).to_chart()
    assert body == {
        "date": "2024-01-06",
        "value": 8440.0,
        "isPrediction": True,
        "unit": "steps",
        "confidenceUpper": 8600.5,
        "confidenceLower": 8279.5,
        "algorithm": "linear-regression",
    }
    hidden = PredictedPointModel.from_point(point, include_confidence=False).to_chart()
    assert "confidenceUpper" not in hidden and "confidenceLower" not in hidden


def test_historical_point_has_no_confidence_keys():
    body = PredictedPointModel.from_point(PredictedDataPoint("2024-01-01", 1.0, False)).to_chart()
    assert body == {"date": "2024-01-01", "value": 1.0, "isPrediction": False}


def test_accuracy_response_drops_infinite_mape():
    resp = AccuracyResponse.from_metrics(AccuracyMetrics(mape=float("inf"), rmse=1.0, mae=1.0, accuracy=90.0))
    assert resp.mape is None
    assert "mape" not in resp.model_dump(by_alias=True, exclude_none=True)


def test_default_algorithm_ignores_case(monkeypatch):
    monkeypatch.setattr(settings, "prediction_default_algorithm", "Moving-Average")
    assert PredictionRequest(series=[]).algorithm is PredictionAlgorithm.moving_average
