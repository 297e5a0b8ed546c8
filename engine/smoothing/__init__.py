"""
Trailing-window smoothing for health metric series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.smoothing.moving_average import moving_average, trailing_residual_std

__all__ = ["moving_average", "trailing_residual_std"]
