# stockwise/pages/base.py
"""
Shared lifecycle for page controllers.

A page loads its collections concurrently when activated, keeps them as a
private in-memory snapshot, derives everything it shows from that snapshot,
and re-fetches after every mutation. Store failures are logged and absorbed
here so a page never crashes on them.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Dict, List, Optional, Tuple, Union

from ..auth import DEFAULT_SIGN_IN_MESSAGE, MemberSession, SignInPrompt
from ..store import RecordStore, StoreError

logger = logging.getLogger(__name__)

FILTER_HINT = "Try adjusting your search or filter criteria."


class PageController(ABC):
    name: str = "page"
    collections: Tuple[str, ...] = ()
    requires_member: bool = True
    sign_in_message: str = DEFAULT_SIGN_IN_MESSAGE

    def __init__(self, store: RecordStore, member_session: MemberSession):
        self.store = store
        self.member_session = member_session
        self.snapshot: Dict[str, List[Any]] = {name: [] for name in self.collections}
        self.is_loading = True
        self.load_error: Optional[StoreError] = None

    async def activate(self) -> Union[Dict[str, Any], SignInPrompt]:
        """Load the page: sign-in gate, initial fetch, then the view model."""
        if self.requires_member and not self.member_session.is_authenticated:
            return SignInPrompt(self.sign_in_message)

        await self.refresh()
        return self.view()

    async def refresh(self, *collections: str) -> bool:
        """
        Fetch the given collections (all of the page's by default) in
        parallel and swap them into the snapshot.

        Fail-together: if any fetch fails, none of the results are applied
        and the previous snapshot (empty on first load) stays in place.
        """
        names = collections or self.collections
        try:
            results = await asyncio.gather(*(self.store.list_all(n) for n in names))
        except StoreError as e:
            logger.error("Error fetching %s data: %s", self.name, e)
            self.load_error = e
            return False
        else:
            for name, result in zip(names, results):
                self.snapshot[name] = result.items
            self.load_error = None
            return True
        finally:
            self.is_loading = False

    async def _mutate(self, action: str, call: Awaitable[Any], *refresh: str) -> bool:
        """
        Await a store mutation, then re-fetch `refresh` collections.
        On failure the error is logged and local state is left as it was.
        """
        try:
            await call
        except StoreError as e:
            logger.error("Error %s: %s", action, e)
            return False
        await self.refresh(*refresh)
        return True

    @staticmethod
    def empty_message(subject: str, filtered: bool) -> Dict[str, str]:
        return {
            "title": f"No {subject} found",
            "hint": FILTER_HINT if filtered else "",
        }

    def _state(self) -> Dict[str, Any]:
        return {
            "page": self.name,
            "is_loading": self.is_loading,
            "error": str(self.load_error) if self.load_error else None,
        }

    @abstractmethod
    def view(self) -> Dict[str, Any]:
        """View model derived from the current snapshot and filters."""
