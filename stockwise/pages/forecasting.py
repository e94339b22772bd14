# stockwise/pages/forecasting.py

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional

import numpy as np

from ..models import UTC_MIN, DemandForecast, Product, as_utc
from ..services.filters import confidence_band
from ..services.metrics import compute_forecast_summary, product_demand
from ..services.mock_forecast import generate_demo_series
from ..store import DEMAND_FORECASTS, PRODUCTS
from .base import PageController

UNKNOWN_PRODUCT = "Unknown Product"
TIME_RANGES = (7, 30, 90)


class ForecastingPage(PageController):
    name = "forecasting"
    collections = (DEMAND_FORECASTS, PRODUCTS)
    sign_in_message = "Sign in to view forecasting"

    def __init__(self, store, member_session, rng: Optional[np.random.Generator] = None):
        super().__init__(store, member_session)
        self.selected_product = "all"
        self.time_range = 30
        self.rng = rng

    @property
    def forecasts(self) -> List[DemandForecast]:
        return self.snapshot[DEMAND_FORECASTS]

    @property
    def products(self) -> List[Product]:
        return self.snapshot[PRODUCTS]

    @property
    def visible_forecasts(self) -> List[DemandForecast]:
        if self.selected_product == "all":
            return list(self.forecasts)
        return [f for f in self.forecasts if f.product_id == self.selected_product]

    def product_name(self, product_id: str) -> str:
        """Name of the referenced product, or a placeholder when it is gone."""
        for p in self.products:
            if p.id == product_id:
                return p.name or UNKNOWN_PRODUCT
        return UNKNOWN_PRODUCT

    def recent_forecasts(self, limit: int = 5) -> List[Dict[str, Any]]:
        """Newest generated forecasts first."""
        rows = sorted(
            self.visible_forecasts,
            key=lambda f: as_utc(f.forecast_generated_date or f.created_date) or UTC_MIN,
            reverse=True,
        )
        return [
            {
                **f.model_dump(mode="json"),
                "product_name": self.product_name(f.product_id),
                "confidence_band": confidence_band(f.confidence_level),
            }
            for f in rows[:limit]
        ]

    def view(self) -> Dict[str, Any]:
        forecasts = self.visible_forecasts
        return {
            **self._state(),
            "selected_product": self.selected_product,
            "time_range": self.time_range,
            "summary": asdict(compute_forecast_summary(forecasts)),
            "product_demand": product_demand(self.products, self.forecasts),
            "recent_forecasts": self.recent_forecasts(),
            # Illustrative curve only, see services.mock_forecast
            "demo_series": {
                "is_demo_data": True,
                "points": generate_demo_series(self.time_range, rng=self.rng),
            },
            "empty_state": self.empty_message(
                "forecasts", self.selected_product != "all"
            ) if not forecasts else None,
        }
