# stockwise/pages/inventory.py

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from ..models import Product
from ..services.filters import is_low_stock, matches_search, stock_status
from ..store import PRODUCTS
from .base import PageController


class ProductFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"
    LOW_STOCK = "lowstock"


@dataclass
class ProductForm:
    name: str = ""
    sku: str = ""
    description: str = ""
    price: float = 0.0
    current_stock: int = 0
    low_stock_threshold: int = 10
    image_ref: str = ""
    is_active: bool = True

    @classmethod
    def from_product(cls, product: Product) -> "ProductForm":
        return cls(
            name=product.name or "",
            sku=product.sku or "",
            description=product.description or "",
            price=product.price or 0.0,
            current_stock=product.current_stock or 0,
            low_stock_threshold=(
                product.low_stock_threshold
                if product.low_stock_threshold is not None
                else 10
            ),
            image_ref=product.image_ref or "",
            is_active=product.is_active,
        )


class InventoryPage(PageController):
    name = "inventory"
    collections = (PRODUCTS,)
    sign_in_message = "Sign in to manage inventory"

    def __init__(self, store, member_session):
        super().__init__(store, member_session)
        self.search_term = ""
        self.status_filter = ProductFilter.ALL
        self.form = ProductForm()
        self.editing: Optional[Product] = None
        self.is_form_open = False

    @property
    def products(self) -> List[Product]:
        return self.snapshot[PRODUCTS]

    @property
    def visible_products(self) -> List[Product]:
        rows = [p for p in self.products if matches_search(self.search_term, p.name, p.sku)]

        if self.status_filter == ProductFilter.ACTIVE:
            rows = [p for p in rows if p.is_active]
        elif self.status_filter == ProductFilter.INACTIVE:
            rows = [p for p in rows if not p.is_active]
        elif self.status_filter == ProductFilter.LOW_STOCK:
            rows = [p for p in rows if is_low_stock(p)]

        return rows

    # ---------- form ----------

    def open_new_form(self) -> None:
        self.form = ProductForm()
        self.editing = None
        self.is_form_open = True

    def start_edit(self, product: Product) -> None:
        self.form = ProductForm.from_product(product)
        self.editing = product
        self.is_form_open = True

    def close_form(self) -> None:
        self.form = ProductForm()
        self.editing = None
        self.is_form_open = False

    async def save_product(self) -> bool:
        """
        Create a product from the form, or fully replace the one being
        edited. The form stays open when the store rejects the write.
        """
        if self.editing is not None:
            record = {"id": self.editing.id, **asdict(self.form)}
            saved = await self._mutate(
                "saving product", self.store.products.update(record), PRODUCTS
            )
        else:
            record = {"id": str(uuid.uuid4()), **asdict(self.form)}
            saved = await self._mutate(
                "saving product", self.store.products.create(record), PRODUCTS
            )

        if saved:
            self.close_form()
        return saved

    async def delete_product(self, product_id: str) -> bool:
        return await self._mutate(
            "deleting product", self.store.products.delete(product_id), PRODUCTS
        )

    # ---------- view ----------

    def view(self) -> Dict[str, Any]:
        rows = self.visible_products
        filtered = bool(self.search_term) or self.status_filter != ProductFilter.ALL
        return {
            **self._state(),
            "search_term": self.search_term,
            "status_filter": self.status_filter.value,
            "total": len(self.products),
            "products": [
                {**p.model_dump(mode="json"), "stock_status": stock_status(p)}
                for p in rows
            ],
            "empty_state": self.empty_message("products", filtered) if not rows else None,
        }
