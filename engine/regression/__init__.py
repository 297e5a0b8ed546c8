"""
Ordinary least squares regression for health metric trends.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.regression.linear import DataPoint, RegressionResult, linear_regression

__all__ = ["DataPoint", "RegressionResult", "linear_regression"]
