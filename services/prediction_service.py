"""
Prediction service that turns chart requests into forecast responses using the statistics engine.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging

from api.requests import BacktestRequest, PredictionRequest
from api.responses import AccuracyResponse, PredictedPointModel, PredictionResponse
from engine.forecast import accuracy_band, backtest, predict

log = logging.getLogger(__name__)


def run_prediction(req: PredictionRequest) -> PredictionResponse:
    log.info(
        "prediction request algorithm=%s horizon=%d points=%d",
        req.algorithm.value, req.horizon, len(req.series),
    )
    result = predict(
        [entry.model_dump() for entry in req.series],
        algorithm=req.algorithm,
        horizon=req.horizon,
        confidence_level=req.confidence_level,
    )
    if not result.predictions and req.series:
        log.info("prediction skipped: %d points is not enough history", len(req.series))

    return PredictionResponse(
        data=[PredictedPointModel.from_point(p, req.include_confidence) for p in result.points],
        algorithm=result.algorithm,
        accuracy=result.accuracy,
        accuracy_band=accuracy_band(result.accuracy),
        confidence_level=result.confidence_level,
        prediction_count=len(result.predictions),
    )


def run_backtest(req: BacktestRequest) -> AccuracyResponse:
    log.info("backtest request holdout=%d points=%d", req.holdout, len(req.series))
    metrics = backtest(
        [entry.model_dump() for entry in req.series],
        algorithm=req.algorithm,
        holdout=req.holdout,
    )
    return AccuracyResponse.from_metrics(metrics)
