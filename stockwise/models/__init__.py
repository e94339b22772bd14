from .master import Product, ProductBase, Member, MemberBase
from .sales import SalesOrder, SalesOrderBase, OrderStatus, PaymentStatus
from .planning import DemandForecast, DemandForecastBase
from .notifications import Notification, NotificationBase
from .types import UTC_MIN, UTCDateTime, as_utc

__all__ = [
    "Product",
    "ProductBase",
    "Member",
    "MemberBase",
    "SalesOrder",
    "SalesOrderBase",
    "OrderStatus",
    "PaymentStatus",
    "DemandForecast",
    "DemandForecastBase",
    "Notification",
    "NotificationBase",
    "UTC_MIN",
    "UTCDateTime",
    "as_utc",
]
