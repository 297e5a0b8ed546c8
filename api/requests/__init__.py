"""
Request models for prediction consumers such as health trend charts.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from config import settings
from engine.enums import PredictionAlgorithm


class SeriesEntryModel(BaseModel):
    date: str
    value: float
    unit: Optional[str] = None


class PredictionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    series: List[SeriesEntryModel] = Field(default_factory=list)
    algorithm: PredictionAlgorithm = Field(
        default_factory=lambda: PredictionAlgorithm.parse(None)
    )
    horizon: int = Field(default_factory=lambda: settings.prediction_default_horizon, alias="predictionHorizon", ge=1)
    include_confidence: bool = Field(default=True, alias="showConfidenceInterval")
    confidence_level: float = Field(
        default_factory=lambda: settings.prediction_confidence_level,
        alias="confidenceLevel",
        gt=0.0,
        lt=1.0,
    )

    @model_validator(mode="after")
    def _check_horizon(self) -> "PredictionRequest":
        if self.horizon > settings.prediction_max_horizon:
            raise ValueError(f"horizon must be <= {settings.prediction_max_horizon}")
        return self


class BacktestRequest(BaseModel):
    series: List[SeriesEntryModel]
    algorithm: Optional[PredictionAlgorithm] = None
    holdout: int = Field(default_factory=lambda: settings.backtest_default_holdout, ge=1)
