import logging
import uuid
from datetime import date, datetime, timedelta, timezone

from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from .models.master import Product, Member
from .models.sales import SalesOrder, OrderStatus, PaymentStatus
from .models.planning import DemandForecast
from .models.notifications import Notification

logger = logging.getLogger(__name__)


def seed_demo_data(engine: Engine) -> None:
    """
    Seeds a demo member, products, sales orders, forecasts and notifications.
    Skips seeding if the Product table is non-empty.
    """
    now = datetime.now(timezone.utc)
    today = date.today()

    with Session(engine) as session:
        # Skip if already seeded
        if session.exec(select(Product)).first():
            return

        # === Members ===
        session.add(
            Member(
                id="member-demo",
                email="manager@stockwise.local",
                role="Manager",
                first_name="Dana",
                last_name="Reyes",
                last_login_date=now,
                is_active=True,
                created_date=now,
                updated_date=now,
            )
        )

        # === Products ===
        products = [
            {"id": "prod-widget", "name": "Pro Widget", "sku": "WID-001", "price": 24.99, "current_stock": 5, "low_stock_threshold": 10},
            {"id": "prod-gadget", "name": "Gadget Max", "sku": "GAD-002", "price": 89.00, "current_stock": 15, "low_stock_threshold": 10},
            {"id": "prod-cable", "name": "USB-C Cable 2m", "sku": "CAB-003", "price": 9.50, "current_stock": 240, "low_stock_threshold": 50},
            {"id": "prod-hub", "name": "Desk Hub", "sku": "HUB-004", "price": 49.00, "current_stock": 12, "low_stock_threshold": 12},
            {"id": "prod-stand", "name": "Laptop Stand", "sku": "STD-005", "price": 35.00, "current_stock": 0, "low_stock_threshold": 5, "is_active": False},
        ]
        session.add_all(
            [Product(**p, created_date=now, updated_date=now) for p in products]
        )

        # === Sales orders (one per status) ===
        orders = [
            ("ORD-100101", "Acme Retail", 249.90, OrderStatus.COMPLETED, PaymentStatus.PAID),
            ("ORD-100102", "Northwind Traders", 89.00, OrderStatus.PENDING, PaymentStatus.PENDING),
            ("ORD-100103", "Globex", 475.00, OrderStatus.PROCESSING, PaymentStatus.PAID),
            ("ORD-100104", "Initech", 35.00, OrderStatus.CANCELLED, PaymentStatus.REFUNDED),
        ]
        for i, (number, customer, amount, status, payment) in enumerate(orders):
            session.add(
                SalesOrder(
                    id=str(uuid.uuid4()),
                    order_number=number,
                    order_date=now - timedelta(days=len(orders) - i),
                    customer_name=customer,
                    total_amount=amount,
                    order_status=status,
                    payment_status=payment,
                    invoice_number=number.replace("ORD", "INV"),
                    created_date=now,
                    updated_date=now,
                )
            )

        # === Demand forecasts ===
        # The last one points at a product that no longer exists
        forecasts = [
            ("prod-widget", 120, 92.5),
            ("prod-gadget", 60, 78.0),
            ("prod-cable", 400, 65.0),
            ("prod-retired", 30, 88.0),
        ]
        for product_id, qty, confidence in forecasts:
            session.add(
                DemandForecast(
                    id=str(uuid.uuid4()),
                    product_id=product_id,
                    forecast_generated_date=now,
                    period_start=today,
                    period_end=today + timedelta(days=30),
                    predicted_demand_quantity=qty,
                    confidence_level=confidence,
                    created_date=now,
                    updated_date=now,
                )
            )

        # === Notifications ===
        notifications = [
            ("low_stock", "Pro Widget is below its stock threshold", "high", False, "prod-widget"),
            ("sales", "New order ORD-100102 from Northwind Traders", "medium", False, "ORD-100102"),
            ("forecast", "Demand for USB-C Cable 2m expected to rise", "low", True, "prod-cable"),
            ("ai", "Consider restocking Desk Hub before next week", "medium", False, "prod-hub"),
            ("order", "Order ORD-100101 completed", "low", True, "ORD-100101"),
        ]
        for i, (ntype, message, priority, is_read, related) in enumerate(notifications):
            session.add(
                Notification(
                    id=str(uuid.uuid4()),
                    notification_type=ntype,
                    message=message,
                    created_at=now - timedelta(hours=i),
                    is_read=is_read,
                    priority=priority,
                    related_item=related,
                    created_date=now,
                    updated_date=now,
                )
            )

        session.commit()
        logger.info("Seeded demo data")
