from enum import Enum
from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field

from .types import UTCDateTime


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class SalesOrderBase(SQLModel):
    order_number: str
    order_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    customer_name: Optional[str] = None
    total_amount: float = 0.0
    order_status: OrderStatus = OrderStatus.PENDING    # no enforced transitions
    payment_status: PaymentStatus = PaymentStatus.PENDING
    invoice_number: Optional[str] = None
    invoice_url: Optional[str] = None


class SalesOrder(SalesOrderBase, table=True):
    id: str = Field(primary_key=True)
    created_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    updated_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
