from .errors import (
    StoreError,
    StoreUnavailable,
    ValidationError,
    ConflictError,
    NotFoundError,
    UnknownCollectionError,
    ReadOnlyCollectionError,
)
from .repository import ListResult, Repository
from .record_store import (
    RecordStore,
    PRODUCTS,
    SALES_ORDERS,
    DEMAND_FORECASTS,
    NOTIFICATIONS,
    USERS,
)

__all__ = [
    "StoreError",
    "StoreUnavailable",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "UnknownCollectionError",
    "ReadOnlyCollectionError",
    "ListResult",
    "Repository",
    "RecordStore",
    "PRODUCTS",
    "SALES_ORDERS",
    "DEMAND_FORECASTS",
    "NOTIFICATIONS",
    "USERS",
]
