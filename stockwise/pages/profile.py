# stockwise/pages/profile.py

from __future__ import annotations

from typing import Any, Dict, Optional

from ..models import Member
from .base import PageController

DEFAULT_ROLE = "Manager"


def display_name(member: Member) -> str:
    if member.nickname:
        return member.nickname
    full = f"{member.first_name or ''} {member.last_name or ''}".strip()
    return full or member.email


def initials(member: Optional[Member]) -> str:
    if member is None:
        return "U"
    if member.first_name and member.last_name:
        return f"{member.first_name[0]}{member.last_name[0]}".upper()
    if member.nickname:
        return member.nickname[0].upper()
    if member.email:
        return member.email[0].upper()
    return "U"


class ProfilePage(PageController):
    """Read-only view of the signed-in member; loads no collections."""

    name = "profile"

    def view(self) -> Dict[str, Any]:
        member = self.member_session.member
        if member is None:
            return {**self._state(), "member": None}

        return {
            **self._state(),
            "member": {
                "id": member.id,
                "email": member.email,
                "display_name": display_name(member),
                "initials": initials(member),
                "first_name": member.first_name,
                "last_name": member.last_name,
                "nickname": member.nickname,
                "role": member.role or DEFAULT_ROLE,
                "member_since": member.created_date.isoformat() if member.created_date else None,
                "last_login": member.last_login_date.isoformat() if member.last_login_date else None,
                "status": "Active" if member.is_active else "Inactive",
            },
        }
