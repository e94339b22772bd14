# stockwise/pages/dashboard.py

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List

from ..models import DemandForecast, Notification, Product, SalesOrder
from ..services.metrics import (
    compute_dashboard_metrics,
    order_status_breakdown,
    sales_chart,
    stock_chart,
)
from ..store import DEMAND_FORECASTS, NOTIFICATIONS, PRODUCTS, SALES_ORDERS
from .base import PageController
from .notifications import newest_first_key


class DashboardPage(PageController):
    name = "dashboard"
    collections = (PRODUCTS, SALES_ORDERS, DEMAND_FORECASTS, NOTIFICATIONS)
    sign_in_message = "Sign in to access your dashboard"

    @property
    def products(self) -> List[Product]:
        return self.snapshot[PRODUCTS]

    @property
    def orders(self) -> List[SalesOrder]:
        return self.snapshot[SALES_ORDERS]

    @property
    def forecasts(self) -> List[DemandForecast]:
        return self.snapshot[DEMAND_FORECASTS]

    @property
    def notifications(self) -> List[Notification]:
        return self.snapshot[NOTIFICATIONS]

    def view(self) -> Dict[str, Any]:
        metrics = compute_dashboard_metrics(
            self.products, self.orders, self.forecasts, self.notifications
        )
        return {
            **self._state(),
            "metrics": asdict(metrics),
            "sales_chart": sales_chart(self.orders),
            "stock_chart": stock_chart(self.products),
            "order_status": order_status_breakdown(self.orders),
            "recent_notifications": [
                {
                    "id": n.id,
                    "message": n.message,
                    "created_at": n.created_at.isoformat() if n.created_at else None,
                    "is_read": n.is_read,
                }
                for n in sorted(self.notifications, key=newest_first_key, reverse=True)[:5]
            ],
        }
