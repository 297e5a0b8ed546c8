"""
Confidence bands around point predictions.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.confidence.interval import (
    ConfidenceInterval,
    ConfidenceIntervalConfig,
    critical_value,
    generate_confidence_interval,
)

__all__ = ["ConfidenceInterval", "ConfidenceIntervalConfig", "critical_value", "generate_confidence_interval"]
