# stockwise/api/deps.py

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException

from ..auth import DEFAULT_SIGN_IN_MESSAGE, MemberSession
from ..database import engine
from ..store import USERS, RecordStore, StoreUnavailable

logger = logging.getLogger(__name__)

# Global store instance
_store: Optional[RecordStore] = None


def get_store() -> RecordStore:
    """Get or create the process-wide record store."""
    global _store
    if _store is None:
        _store = RecordStore(engine)
    return _store


async def get_member_session(
    x_member_email: Optional[str] = Header(default=None),
    store: RecordStore = Depends(get_store),
) -> MemberSession:
    """
    Resolve the member forwarded by the authentication gateway.

    Unknown or missing emails yield an anonymous session rather than an
    error; protected pages decide what to do with it. So does a users
    lookup that cannot reach the backend.
    """
    if not x_member_email:
        return MemberSession()

    try:
        result = await store.list_all(USERS)
    except StoreUnavailable as e:
        logger.warning("Could not resolve member %s: %s", x_member_email, e)
        return MemberSession()

    email = x_member_email.strip().lower()
    member = next((m for m in result.items if m.email.lower() == email), None)
    return MemberSession(member)


def require_member(session: MemberSession = Depends(get_member_session)) -> MemberSession:
    if not session.is_authenticated:
        raise HTTPException(status_code=401, detail=DEFAULT_SIGN_IN_MESSAGE)
    return session
