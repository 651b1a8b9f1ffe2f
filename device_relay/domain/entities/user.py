"""
User entity and role enumeration.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List

from .base import utc_now


class UserRole(str, Enum):
    """Permission tiers for operator accounts."""
    ADMIN = "admin"          # User management and command enqueue
    MANAGER = "manager"      # Read access to logs and status
    REPORTER = "reporter"    # Read access to logs and status

    @classmethod
    def values(cls) -> List[str]:
        return [role.value for role in cls]


@dataclass
class User:
    """
    An operator account.

    Only the bcrypt hash of the password is kept.
    """
    username: str
    password_hash: str
    role: UserRole = UserRole.REPORTER
    created_at: datetime = field(default_factory=utc_now)

    def to_public_dict(self) -> Dict[str, Any]:
        """Serialize without credentials."""
        return {
            'username': self.username,
            'role': self.role.value,
        }
