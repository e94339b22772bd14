# stockwise/pages/notifications.py

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from ..models import UTC_MIN, Notification, as_utc
from ..services.filters import matches_search
from ..services.metrics import compute_notification_counts
from ..store import NOTIFICATIONS, StoreError
from .base import PageController

logger = logging.getLogger(__name__)

TYPE_LABELS = {
    "low_stock": "Low Stock Alert",
    "inventory": "Inventory Update",
    "sales": "Sales Notification",
    "order": "Order Update",
    "forecast": "Forecast Alert",
    "ai": "AI Insight",
    "alert": "System Alert",
    "warning": "Warning",
}


class ReadFilter(str, Enum):
    ALL = "all"
    UNREAD = "unread"
    READ = "read"


def type_label(notification_type: Optional[str]) -> str:
    return TYPE_LABELS.get(notification_type or "", "Notification")


def newest_first_key(n: Notification) -> datetime:
    return as_utc(n.created_at or n.created_date) or UTC_MIN


class NotificationsPage(PageController):
    name = "notifications"
    collections = (NOTIFICATIONS,)
    sign_in_message = "Sign in to view notifications"

    def __init__(self, store, member_session):
        super().__init__(store, member_session)
        self.search_term = ""
        self.type_filter: Optional[str] = None  # None = all types
        self.read_filter = ReadFilter.ALL

    @property
    def notifications(self) -> List[Notification]:
        return self.snapshot[NOTIFICATIONS]

    @property
    def visible_notifications(self) -> List[Notification]:
        rows = [
            n
            for n in self.notifications
            if matches_search(self.search_term, n.message, n.notification_type)
        ]
        if self.type_filter is not None:
            rows = [n for n in rows if n.notification_type == self.type_filter]

        if self.read_filter == ReadFilter.UNREAD:
            rows = [n for n in rows if not n.is_read]
        elif self.read_filter == ReadFilter.READ:
            rows = [n for n in rows if n.is_read]

        return sorted(rows, key=newest_first_key, reverse=True)

    def toggle_type_filter(self, notification_type: str) -> None:
        self.type_filter = None if self.type_filter == notification_type else notification_type

    async def mark_as_read(self, notification_id: str) -> bool:
        notification = next((n for n in self.notifications if n.id == notification_id), None)
        if notification is None:
            return False

        record = {**notification.model_dump(), "is_read": True}
        return await self._mutate(
            "marking notification as read",
            self.store.notifications.update(record),
            NOTIFICATIONS,
        )

    async def mark_all_as_read(self) -> bool:
        """Send every unread notification back as read, then re-fetch once."""
        unread = [n for n in self.notifications if not n.is_read]
        return await self._mutate(
            "marking all notifications as read", self._mark_read(unread), NOTIFICATIONS
        )

    async def _mark_read(self, notifications: List[Notification]) -> None:
        """
        Update all of them concurrently. Every failed update is logged; the
        first one is re-raised once all updates have settled.
        """
        results = await asyncio.gather(
            *(
                self.store.notifications.update({**n.model_dump(), "is_read": True})
                for n in notifications
            ),
            return_exceptions=True,
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        for failure in failures:
            if not isinstance(failure, StoreError):
                raise failure
            logger.error("Error marking notification as read: %s", failure)
        if failures:
            raise failures[0]

    def view(self) -> Dict[str, Any]:
        rows = self.visible_notifications
        filtered = (
            bool(self.search_term)
            or self.type_filter is not None
            or self.read_filter != ReadFilter.ALL
        )
        return {
            **self._state(),
            "search_term": self.search_term,
            "type_filter": self.type_filter or "all",
            "read_filter": self.read_filter.value,
            "counts": asdict(compute_notification_counts(self.notifications)),
            "notifications": [
                {**n.model_dump(mode="json"), "type_label": type_label(n.notification_type)}
                for n in rows
            ],
            "empty_state": self.empty_message("notifications", filtered) if not rows else None,
        }
