from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field

from .types import UTCDateTime


class NotificationBase(SQLModel):
    message: str
    notification_type: Optional[str] = None  # low_stock, sales, forecast, ...
    created_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    is_read: bool = False
    priority: Optional[str] = None           # high, medium, low
    related_item: Optional[str] = None
    action_url: Optional[str] = None


class Notification(NotificationBase, table=True):
    id: str = Field(primary_key=True)
    created_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    updated_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
