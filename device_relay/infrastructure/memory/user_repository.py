"""
In-memory user directory.
"""
import asyncio
from typing import Dict, Iterable, List, Optional

from ...application.interfaces import UserDirectory
from ...domain.entities import User
from ...domain.exceptions import DuplicateUserException


class UserRepository(UserDirectory):
    """Username-keyed account table, seeded at construction."""

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._users: Dict[str, User] = {}
        self._lock = asyncio.Lock()
        for user in users or ():
            if user.username in self._users:
                raise DuplicateUserException(user.username)
            self._users[user.username] = user

    async def get(self, username: str) -> Optional[User]:
        async with self._lock:
            return self._users.get(username)

    async def add(self, user: User) -> User:
        async with self._lock:
            if user.username in self._users:
                raise DuplicateUserException(user.username)
            self._users[user.username] = user
            return user

    async def list_all(self) -> List[User]:
        async with self._lock:
            return list(self._users.values())
