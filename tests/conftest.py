import os
import sys

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


def _daily(values, start_day=1, unit=None):
    return [
        {"date": f"2024-01-{start_day + i:02d}", "value": v, **({"unit": unit} if unit else {})}
        for i, v in enumerate(values)
    ]


@pytest.fixture
def daily_series():
    """Build a consecutive daily series starting 2024-01-01 from a list of values."""
    return _daily


@pytest.fixture
def weight_loss_series():
    return _daily([80.0, 79.4, 79.1, 78.5, 78.0, 77.6, 77.1, 76.5, 76.2, 75.7], unit="kg")
