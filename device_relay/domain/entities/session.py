"""
Operator session entity.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from .base import utc_now
from .user import UserRole


DEFAULT_SESSION_WINDOW = timedelta(hours=8)


@dataclass
class Session:
    """
    Bearer-token session bound to a username/role pair.

    The expiry is fixed at issuance; sessions are never extended.
    """
    token: str
    username: str
    role: UserRole
    created_at: datetime = field(default_factory=utc_now)
    expire_at: Optional[datetime] = None

    def __post_init__(self):
        if self.expire_at is None:
            self.expire_at = self.created_at + DEFAULT_SESSION_WINDOW

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check if the session has passed its expiry time."""
        return (now or utc_now()) > self.expire_at

    def has_role(self, *roles: UserRole) -> bool:
        return self.role in roles
