# stockwise/pages/sales.py

from __future__ import annotations

import time
import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..models import OrderStatus, PaymentStatus, Product, SalesOrder
from ..services.filters import matches_search
from ..services.metrics import compute_sales_summary
from ..store import PRODUCTS, SALES_ORDERS
from .base import PageController


def _clock_suffix() -> str:
    return str(int(time.time() * 1000))[-6:]


def generate_order_number() -> str:
    return f"ORD-{_clock_suffix()}"


def generate_invoice_number() -> str:
    return f"INV-{_clock_suffix()}"


@dataclass
class SalesOrderForm:
    order_number: str = field(default_factory=generate_order_number)
    customer_name: str = ""
    total_amount: float = 0.0
    order_status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    invoice_number: str = field(default_factory=generate_invoice_number)
    invoice_url: str = ""


class SalesPage(PageController):
    name = "sales"
    collections = (SALES_ORDERS, PRODUCTS)
    sign_in_message = "Sign in to view sales"

    def __init__(self, store, member_session):
        super().__init__(store, member_session)
        self.search_term = ""
        self.status_filter: Optional[OrderStatus] = None  # None = all
        self.form = SalesOrderForm()

    @property
    def orders(self) -> List[SalesOrder]:
        return self.snapshot[SALES_ORDERS]

    @property
    def products(self) -> List[Product]:
        return self.snapshot[PRODUCTS]

    @property
    def visible_orders(self) -> List[SalesOrder]:
        rows = [
            o
            for o in self.orders
            if matches_search(self.search_term, o.order_number, o.customer_name, o.invoice_number)
        ]
        if self.status_filter is not None:
            rows = [o for o in rows if o.order_status == self.status_filter]
        return rows

    def reset_form(self) -> None:
        self.form = SalesOrderForm()

    async def create_order(self) -> bool:
        record = {
            "id": str(uuid.uuid4()),
            **asdict(self.form),
            "order_date": datetime.now(timezone.utc),
        }
        created = await self._mutate(
            "creating order", self.store.sales_orders.create(record), SALES_ORDERS
        )
        if created:
            self.reset_form()
        return created

    def view(self) -> Dict[str, Any]:
        rows = self.visible_orders
        filtered = bool(self.search_term) or self.status_filter is not None
        return {
            **self._state(),
            "search_term": self.search_term,
            "status_filter": self.status_filter.value if self.status_filter else "all",
            "summary": asdict(compute_sales_summary(self.orders)),
            "orders": [o.model_dump(mode="json") for o in rows],
            "products": [{"id": p.id, "name": p.name} for p in self.products],
            "empty_state": self.empty_message("orders", filtered) if not rows else None,
        }
