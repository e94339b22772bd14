# stockwise/services/mock_forecast.py
"""
Demo-only demand curve for the forecasting charts.

This is NOT a forecasting model. It draws a sine wave around 100 units
with uniform noise so the page has something to plot until real forecasts
are wired in. Nothing here looks at stored records.
"""

from datetime import date, timedelta
from typing import Dict, List, Optional

import numpy as np

ACTUALS_DAYS = 7


def generate_demo_series(
    days: int = 30,
    start: Optional[date] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Dict]:
    """
    One point per day starting at `start` (today by default):
      predicted  = max(0, round(100 + 20*sin(0.2*i) + noise)), noise in [-15, 15)
      confidence = 85-95
      actual     = only for the first 7 points, damped noise
    """
    if days <= 0:
        return []
    start = start or date.today()
    rng = rng or np.random.default_rng()

    idx = np.arange(days)
    base = 100.0 + np.sin(idx * 0.2) * 20.0
    variance = rng.uniform(-15.0, 15.0, size=days)
    confidence = 85.0 + rng.uniform(0.0, 10.0, size=days)

    predicted = np.maximum(0, np.round(base + variance))
    actual = np.maximum(0, np.round(base + variance * 0.8))

    return [
        {
            "date": (start + timedelta(days=i)).isoformat(),
            "predicted": int(predicted[i]),
            "confidence": round(float(confidence[i]), 1),
            "actual": int(actual[i]) if i < ACTUALS_DAYS else None,
        }
        for i in range(days)
    ]
