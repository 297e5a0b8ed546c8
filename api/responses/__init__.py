"""
Response models for prediction consumers, serialized with the camelCase keys chart components read.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

from engine.accuracy.metrics import AccuracyMetrics
from engine.enums import PredictionAlgorithm
from engine.forecast.predictive import PredictedDataPoint


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class PredictedPointModel(NpModel):

    date: str
    value: float
    is_prediction: bool
    unit: Optional[str] = None
    confidence_upper: Optional[float] = None
    confidence_lower: Optional[float] = None
    algorithm: Optional[PredictionAlgorithm] = None

    @classmethod
    def from_point(cls, point: PredictedDataPoint, include_confidence: bool = True) -> "PredictedPointModel":
        return cls(
            date=point.date,
            value=point.value,
            is_prediction=point.is_prediction,
            unit=point.unit,
            confidence_upper=point.confidence_upper if include_confidence else None,
            confidence_lower=point.confidence_lower if include_confidence else None,
            algorithm=point.algorithm,
        )

    def to_chart(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class PredictionResponse(NpModel):

    data: List[PredictedPointModel] = Field(default_factory=list)
    algorithm: PredictionAlgorithm
    accuracy: float
    accuracy_band: str
    confidence_level: float
    prediction_count: int = 0

    def to_chart(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class AccuracyResponse(NpModel):

    mape: Optional[float] = None
    rmse: float
    mae: float
    accuracy: float

    @classmethod
    def from_metrics(cls, metrics: AccuracyMetrics) -> "AccuracyResponse":
        # JSON has no infinity; an undefined MAPE is reported as absent
        mape = metrics.mape if np.isfinite(metrics.mape) else None
        return cls(mape=mape, rmse=metrics.rmse, mae=metrics.mae, accuracy=metrics.accuracy)
