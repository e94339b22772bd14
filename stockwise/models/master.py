from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field

from .types import UTCDateTime


class ProductBase(SQLModel):
    name: str
    sku: Optional[str] = None
    description: Optional[str] = None
    price: float = 0.0
    current_stock: Optional[int] = None
    low_stock_threshold: Optional[int] = None
    image_ref: Optional[str] = None
    is_active: bool = True


class Product(ProductBase, table=True):
    id: str = Field(primary_key=True)
    created_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    updated_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)


class MemberBase(SQLModel):
    email: str
    role: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    nickname: Optional[str] = None
    last_login_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    is_active: bool = True


class Member(MemberBase, table=True):
    """
    Signed-in member as mirrored from the authentication provider.
    Read-only for this service; the provider owns the lifecycle.
    """
    id: str = Field(primary_key=True)
    created_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    updated_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
