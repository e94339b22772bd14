# stockwise/services/metrics.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..models import UTC_MIN, DemandForecast, Notification, OrderStatus, Product, SalesOrder, as_utc
from .filters import is_low_stock, short_label


@dataclass
class DashboardMetrics:
    total_products: int
    active_products: int
    low_stock_products: int
    total_revenue: float
    pending_orders: int
    completed_orders: int
    processing_orders: int
    unread_notifications: int
    forecast_count: int


@dataclass
class SalesSummary:
    total_revenue: float
    pending_orders: int
    completed_orders: int
    average_order_value: float


@dataclass
class ForecastSummary:
    average_confidence: float
    total_predicted_demand: float
    high_confidence_forecasts: int  # >= 90
    low_confidence_forecasts: int   # < 70


@dataclass
class NotificationCounts:
    total: int
    unread: int
    unread_high_priority: int


def _count_status(orders: Sequence[SalesOrder], status: OrderStatus) -> int:
    return sum(1 for o in orders if o.order_status == status)


def total_revenue(orders: Sequence[SalesOrder]) -> float:
    return sum(o.total_amount or 0.0 for o in orders)


def compute_dashboard_metrics(
    products: Sequence[Product],
    orders: Sequence[SalesOrder],
    forecasts: Sequence[DemandForecast],
    notifications: Sequence[Notification],
) -> DashboardMetrics:
    return DashboardMetrics(
        total_products=len(products),
        active_products=sum(1 for p in products if p.is_active),
        low_stock_products=sum(1 for p in products if is_low_stock(p)),
        total_revenue=total_revenue(orders),
        pending_orders=_count_status(orders, OrderStatus.PENDING),
        completed_orders=_count_status(orders, OrderStatus.COMPLETED),
        processing_orders=_count_status(orders, OrderStatus.PROCESSING),
        unread_notifications=sum(1 for n in notifications if not n.is_read),
        forecast_count=len(forecasts),
    )


def compute_sales_summary(orders: Sequence[SalesOrder]) -> SalesSummary:
    revenue = total_revenue(orders)
    return SalesSummary(
        total_revenue=revenue,
        pending_orders=_count_status(orders, OrderStatus.PENDING),
        completed_orders=_count_status(orders, OrderStatus.COMPLETED),
        average_order_value=revenue / len(orders) if orders else 0.0,
    )


def compute_forecast_summary(forecasts: Sequence[DemandForecast]) -> ForecastSummary:
    confidences = [f.confidence_level or 0.0 for f in forecasts]
    return ForecastSummary(
        average_confidence=sum(confidences) / len(confidences) if confidences else 0.0,
        total_predicted_demand=sum(f.predicted_demand_quantity or 0.0 for f in forecasts),
        high_confidence_forecasts=sum(1 for c in confidences if c >= 90.0),
        low_confidence_forecasts=sum(1 for c in confidences if c < 70.0),
    )


def compute_notification_counts(notifications: Sequence[Notification]) -> NotificationCounts:
    unread = [n for n in notifications if not n.is_read]
    return NotificationCounts(
        total=len(notifications),
        unread=len(unread),
        unread_high_priority=sum(1 for n in unread if n.priority == "high"),
    )


# ---------- chart feeds ----------

def sales_chart(orders: Sequence[SalesOrder], last: int = 7) -> List[Dict]:
    """The `last` most recent orders by order date, oldest first."""
    by_date = sorted(orders, key=lambda o: as_utc(o.order_date) or UTC_MIN)
    return [
        {
            "date": o.order_date.date().isoformat() if o.order_date else None,
            "amount": o.total_amount or 0.0,
        }
        for o in by_date[-last:]
    ]


def stock_chart(products: Sequence[Product], first: int = 5) -> List[Dict]:
    return [
        {
            "name": short_label(p.name),
            "stock": p.current_stock or 0,
            "threshold": p.low_stock_threshold or 0,
        }
        for p in list(products)[:first]
    ]


def order_status_breakdown(orders: Sequence[SalesOrder]) -> List[Dict]:
    return [
        {"name": "Completed", "value": _count_status(orders, OrderStatus.COMPLETED)},
        {"name": "Pending", "value": _count_status(orders, OrderStatus.PENDING)},
        {"name": "Processing", "value": _count_status(orders, OrderStatus.PROCESSING)},
    ]


def product_demand(
    products: Sequence[Product],
    forecasts: Sequence[DemandForecast],
    first: int = 6,
) -> List[Dict]:
    """
    Average predicted demand per product for the first `first` products.
    Products without forecasts report 0 demand and no confidence.
    """
    by_product: Dict[str, List[DemandForecast]] = {}
    for f in forecasts:
        by_product.setdefault(f.product_id, []).append(f)

    rows = []
    for p in list(products)[:first]:
        rows_for_product = by_product.get(p.id, [])
        if rows_for_product:
            demand = sum(f.predicted_demand_quantity or 0.0 for f in rows_for_product) / len(rows_for_product)
            confidence = sum(f.confidence_level or 0.0 for f in rows_for_product) / len(rows_for_product)
        else:
            demand, confidence = 0.0, None
        rows.append(
            {
                "product_id": p.id,
                "name": short_label(p.name),
                "demand": round(demand),
                "confidence": round(confidence) if confidence is not None else None,
            }
        )
    return rows
