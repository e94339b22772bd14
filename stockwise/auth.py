# stockwise/auth.py
"""
Member session context.

Authentication itself happens upstream; this module only carries the
result (who is signed in) to the page controllers, which receive it as an
explicit constructor argument.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .models import Member

logger = logging.getLogger(__name__)

DEFAULT_SIGN_IN_MESSAGE = "Sign in to access this page"


@dataclass
class SignInPrompt:
    """Returned by a protected page instead of its view when nobody is signed in."""
    message: str = DEFAULT_SIGN_IN_MESSAGE

    def to_dict(self):
        return {"sign_in_required": True, "message": self.message}


class MemberSession:
    def __init__(self, member: Optional[Member] = None):
        self.member = member

    @property
    def is_authenticated(self) -> bool:
        return self.member is not None and self.member.is_active

    def login(self, member: Member) -> None:
        self.member = member
        logger.info("Member %s signed in", member.email)

    def logout(self) -> None:
        if self.member is not None:
            logger.info("Member %s signed out", self.member.email)
        self.member = None
