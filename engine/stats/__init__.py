"""
Descriptive statistics shared by the regression, smoothing and accuracy modules.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.stats.descriptive import calculate_covariance, calculate_mean, calculate_variance

__all__ = ["calculate_mean", "calculate_variance", "calculate_covariance"]
