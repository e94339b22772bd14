# stockwise/store/record_store.py

from typing import Dict, List

from sqlalchemy.engine import Engine

from ..models import (
    DemandForecast,
    DemandForecastBase,
    Member,
    MemberBase,
    Notification,
    NotificationBase,
    Product,
    ProductBase,
    SalesOrder,
    SalesOrderBase,
)
from .errors import UnknownCollectionError
from .repository import ListResult, Record, Repository

PRODUCTS = "products"
SALES_ORDERS = "salesorders"
DEMAND_FORECASTS = "demandforecasts"
NOTIFICATIONS = "notifications"
USERS = "users"


class RecordStore:
    """
    Single entry point for reading and mutating the named collections.

    Typed access goes through the per-entity repositories
    (store.products, store.sales_orders, ...); the name-based methods
    dispatch to the same repositories for callers that only know a
    collection name.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.products: Repository[Product] = Repository(
            PRODUCTS, Product, ProductBase, engine, deletable=True
        )
        self.sales_orders: Repository[SalesOrder] = Repository(
            SALES_ORDERS, SalesOrder, SalesOrderBase, engine
        )
        self.forecasts: Repository[DemandForecast] = Repository(
            DEMAND_FORECASTS, DemandForecast, DemandForecastBase, engine
        )
        self.notifications: Repository[Notification] = Repository(
            NOTIFICATIONS, Notification, NotificationBase, engine
        )
        # Only products can be deleted. Members are managed by the
        # authentication provider
        self.users: Repository[Member] = Repository(
            USERS, Member, MemberBase, engine, read_only=True
        )

        self._collections: Dict[str, Repository] = {
            repo.name: repo
            for repo in (
                self.products,
                self.sales_orders,
                self.forecasts,
                self.notifications,
                self.users,
            )
        }

    @property
    def collection_names(self) -> List[str]:
        return list(self._collections)

    def collection(self, name: str) -> Repository:
        try:
            return self._collections[name]
        except KeyError:
            raise UnknownCollectionError(f"Unknown collection '{name}'") from None

    async def list_all(self, name: str) -> ListResult:
        return await self.collection(name).list_all()

    async def create(self, name: str, record: Record):
        return await self.collection(name).create(record)

    async def update(self, name: str, record: Record):
        return await self.collection(name).update(record)

    async def delete(self, name: str, record_id: str) -> None:
        await self.collection(name).delete(record_id)
