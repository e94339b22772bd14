"""Sales page: order search, status filter, summary and order creation."""

import re

import pytest

from stockwise.auth import SignInPrompt
from stockwise.models import OrderStatus
from stockwise.pages import SalesPage


async def _seed(store):
    await store.create("salesorders", {"id": "o1", "order_number": "ORD-000001", "customer_name": "Acme Retail", "total_amount": 100.0, "order_status": "pending", "invoice_number": "INV-000001"})
    await store.create("salesorders", {"id": "o2", "order_number": "ORD-000002", "customer_name": "Globex", "total_amount": 300.0, "order_status": "completed", "invoice_number": "INV-000002"})
    await store.create("products", {"id": "p1", "name": "Pro Widget"})


class TestSalesPage:

    @pytest.mark.asyncio
    async def test_anonymous(self, store, anonymous):
        result = await SalesPage(store, anonymous).activate()
        assert isinstance(result, SignInPrompt)
        assert result.message == "Sign in to view sales"

    @pytest.mark.asyncio
    async def test_summary(self, store, member_session):
        await _seed(store)
        view = await SalesPage(store, member_session).activate()

        assert view["summary"] == {
            "total_revenue": 400.0,
            "pending_orders": 1,
            "completed_orders": 1,
            "average_order_value": 200.0,
        }
        assert view["products"] == [{"id": "p1", "name": "Pro Widget"}]

    @pytest.mark.asyncio
    async def test_search_customer_and_invoice(self, store, member_session):
        await _seed(store)
        page = SalesPage(store, member_session)
        await page.activate()

        page.search_term = "acme"
        assert [o.id for o in page.visible_orders] == ["o1"]

        page.search_term = "inv-000002"
        assert [o.id for o in page.visible_orders] == ["o2"]

    @pytest.mark.asyncio
    async def test_status_filter(self, store, member_session):
        await _seed(store)
        page = SalesPage(store, member_session)
        await page.activate()

        page.status_filter = OrderStatus.COMPLETED
        assert [o.id for o in page.visible_orders] == ["o2"]

        page.status_filter = OrderStatus.CANCELLED
        view = page.view()
        assert view["orders"] == []
        assert view["empty_state"]["title"] == "No orders found"

    @pytest.mark.asyncio
    async def test_form_generates_numbers(self, store, member_session):
        page = SalesPage(store, member_session)
        assert re.fullmatch(r"ORD-\d{6}", page.form.order_number)
        assert re.fullmatch(r"INV-\d{6}", page.form.invoice_number)
        assert page.form.order_status == OrderStatus.PENDING

    @pytest.mark.asyncio
    async def test_create_order(self, store, member_session):
        page = SalesPage(store, member_session)
        await page.activate()

        page.form.customer_name = "Initech"
        page.form.total_amount = 42.0
        number = page.form.order_number

        assert await page.create_order()

        assert len(page.orders) == 1
        created = page.orders[0]
        assert created.order_number == number
        assert created.customer_name == "Initech"
        assert created.order_date is not None
        assert page.form.customer_name == ""
