"""Pure derivations: filters, metrics and the demo forecast curve."""

from datetime import date, datetime

import numpy as np
import pytest

from stockwise.models import DemandForecast, Notification, OrderStatus, Product, SalesOrder
from stockwise.services.filters import (
    confidence_band,
    is_low_stock,
    matches_search,
    short_label,
    stock_status,
)
from stockwise.services.metrics import (
    compute_dashboard_metrics,
    compute_forecast_summary,
    compute_notification_counts,
    compute_sales_summary,
    order_status_breakdown,
    product_demand,
    sales_chart,
    stock_chart,
)
from stockwise.services.mock_forecast import generate_demo_series


def _order(i, amount, status):
    return SalesOrder(
        id=f"o-{i}",
        order_number=f"ORD-{i}",
        order_date=datetime(2024, 1, i + 1),
        total_amount=amount,
        order_status=status,
    )


class TestFilters:

    def test_search_is_case_insensitive_substring(self):
        assert matches_search("pro", "Pro Widget")
        assert matches_search("WIDG", "Pro Widget")
        assert not matches_search("gadget", "Pro Widget")

    def test_search_any_field(self):
        assert matches_search("wid-0", "Something", "WID-001")

    def test_empty_search_matches_everything(self):
        assert matches_search("", None)

    def test_missing_field_never_matches(self):
        assert not matches_search("pro", None, None)

    def test_low_stock_predicate(self):
        assert is_low_stock(Product(id="a", name="a", current_stock=5, low_stock_threshold=10))
        assert is_low_stock(Product(id="b", name="b", current_stock=10, low_stock_threshold=10))
        assert not is_low_stock(Product(id="c", name="c", current_stock=15, low_stock_threshold=10))

    def test_low_stock_needs_both_numbers(self):
        assert not is_low_stock(Product(id="a", name="a", current_stock=5))
        assert not is_low_stock(Product(id="b", name="b", low_stock_threshold=10))

    def test_negative_stock_is_low(self):
        assert is_low_stock(Product(id="a", name="a", current_stock=-3, low_stock_threshold=0))

    @pytest.mark.parametrize(
        "stock,threshold,expected",
        [
            (None, 10, "unknown"),
            (5, None, "unknown"),
            (0, 10, "low"),
            (10, 10, "low"),
            (20, 10, "medium"),
            (21, 10, "high"),
        ],
    )
    def test_stock_status(self, stock, threshold, expected):
        product = Product(id="p", name="p", current_stock=stock, low_stock_threshold=threshold)
        assert stock_status(product) == expected

    def test_confidence_band(self):
        assert confidence_band(95) == "high"
        assert confidence_band(90) == "high"
        assert confidence_band(70) == "medium"
        assert confidence_band(69.9) == "low"
        assert confidence_band(None) == "low"

    def test_short_label(self):
        assert short_label("Ergonomic Keyboard") == "Ergonomic ..."
        assert short_label(None) == "Product"


class TestMetrics:

    def test_dashboard_metrics(self):
        products = [
            Product(id="a", name="a", current_stock=5, low_stock_threshold=10, is_active=True),
            Product(id="b", name="b", current_stock=15, low_stock_threshold=10, is_active=False),
        ]
        orders = [
            _order(0, 100.0, OrderStatus.PENDING),
            _order(1, 50.0, OrderStatus.COMPLETED),
            _order(2, 25.0, OrderStatus.PROCESSING),
        ]
        notifications = [
            Notification(id="n1", message="x", is_read=False),
            Notification(id="n2", message="y", is_read=True),
        ]
        forecasts = [DemandForecast(id="f1", product_id="a")]

        metrics = compute_dashboard_metrics(products, orders, forecasts, notifications)

        assert metrics.total_products == 2
        assert metrics.active_products == 1
        assert metrics.low_stock_products == 1
        assert metrics.total_revenue == 175.0
        assert metrics.pending_orders == 1
        assert metrics.completed_orders == 1
        assert metrics.processing_orders == 1
        assert metrics.unread_notifications == 1
        assert metrics.forecast_count == 1

    def test_sales_summary_average(self):
        summary = compute_sales_summary(
            [_order(0, 100.0, OrderStatus.PENDING), _order(1, 50.0, OrderStatus.COMPLETED)]
        )
        assert summary.total_revenue == 150.0
        assert summary.average_order_value == 75.0

    def test_sales_summary_without_orders(self):
        summary = compute_sales_summary([])
        assert summary.average_order_value == 0.0

    def test_forecast_summary(self):
        forecasts = [
            DemandForecast(id="1", product_id="a", predicted_demand_quantity=100, confidence_level=95),
            DemandForecast(id="2", product_id="a", predicted_demand_quantity=50, confidence_level=60),
            DemandForecast(id="3", product_id="b", predicted_demand_quantity=None, confidence_level=None),
        ]
        summary = compute_forecast_summary(forecasts)
        assert summary.total_predicted_demand == 150
        assert summary.average_confidence == pytest.approx(155 / 3)
        assert summary.high_confidence_forecasts == 1
        assert summary.low_confidence_forecasts == 2

    def test_forecast_summary_empty(self):
        assert compute_forecast_summary([]).average_confidence == 0.0

    def test_notification_counts(self):
        counts = compute_notification_counts(
            [
                Notification(id="1", message="a", priority="high", is_read=False),
                Notification(id="2", message="b", priority="high", is_read=True),
                Notification(id="3", message="c", priority="low", is_read=False),
            ]
        )
        assert counts.total == 3
        assert counts.unread == 2
        assert counts.unread_high_priority == 1

    def test_sales_chart_takes_last_seven(self):
        orders = [_order(i, float(i), OrderStatus.PENDING) for i in range(10)]
        chart = sales_chart(orders)
        assert len(chart) == 7
        assert chart[0] == {"date": "2024-01-04", "amount": 3.0}

    def test_sales_chart_sorts_by_order_date(self):
        orders = [_order(i, float(i), OrderStatus.PENDING) for i in (4, 0, 8, 2, 6, 1, 9, 3, 7, 5)]
        orders.append(SalesOrder(id="undated", order_number="ORD-X", total_amount=99.0))

        chart = sales_chart(orders)

        assert [row["date"] for row in chart] == [f"2024-01-{d:02d}" for d in range(4, 11)]

    def test_stock_chart_takes_first_five(self):
        products = [
            Product(id=str(i), name=f"Item number {i}", current_stock=i, low_stock_threshold=2)
            for i in range(8)
        ]
        chart = stock_chart(products)
        assert len(chart) == 5
        assert chart[1] == {"name": "Item numbe...", "stock": 1, "threshold": 2}

    def test_order_status_breakdown(self):
        breakdown = order_status_breakdown([_order(0, 1.0, OrderStatus.CANCELLED)])
        assert [row["value"] for row in breakdown] == [0, 0, 0]

    def test_product_demand(self):
        products = [Product(id="a", name="Alpha"), Product(id="b", name="Beta")]
        forecasts = [
            DemandForecast(id="1", product_id="a", predicted_demand_quantity=100, confidence_level=90),
            DemandForecast(id="2", product_id="a", predicted_demand_quantity=50, confidence_level=80),
            DemandForecast(id="3", product_id="ghost", predicted_demand_quantity=999),
        ]
        rows = product_demand(products, forecasts)
        assert rows[0]["demand"] == 75
        assert rows[0]["confidence"] == 85
        assert rows[1]["demand"] == 0
        assert rows[1]["confidence"] is None


class TestDemoSeries:

    def test_shape(self):
        points = generate_demo_series(30, start=date(2024, 3, 1), rng=np.random.default_rng(7))
        assert len(points) == 30
        assert points[0]["date"] == "2024-03-01"
        assert points[-1]["date"] == "2024-03-30"

    def test_values_within_bounds(self):
        points = generate_demo_series(90, rng=np.random.default_rng(1))
        for p in points:
            assert p["predicted"] >= 0
            assert 85.0 <= p["confidence"] <= 95.0

    def test_actuals_only_for_first_week(self):
        points = generate_demo_series(10, rng=np.random.default_rng(3))
        assert all(p["actual"] is not None for p in points[:7])
        assert all(p["actual"] is None for p in points[7:])

    def test_seeded_generator_is_repeatable(self):
        first = generate_demo_series(14, start=date(2024, 1, 1), rng=np.random.default_rng(42))
        second = generate_demo_series(14, start=date(2024, 1, 1), rng=np.random.default_rng(42))
        assert first == second

    def test_no_days(self):
        assert generate_demo_series(0) == []
