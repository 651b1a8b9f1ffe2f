"""
Repository interfaces (ports) for the relay stores.

These interfaces define the contract the services depend on. The shipped
implementations keep everything in process memory; a persistent backend
only has to implement the same methods.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ...domain.entities import Command, LogEntry, Session, User, UserRole


class LogStore(ABC):
    """Append-only, size-bounded collection of device reports."""

    @abstractmethod
    async def append(self, entry: LogEntry) -> LogEntry:
        """
        Append a validated entry, evicting the oldest entries when the
        retention ceiling is exceeded.
        """
        pass

    @abstractmethod
    async def list_all(
        self,
        device_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[LogEntry]:
        """List entries, optionally for one device, newest first."""
        pass

    @abstractmethod
    async def list_by_device(self, device_id: str) -> List[LogEntry]:
        """List every entry for a device, newest first."""
        pass

    @abstractmethod
    async def latest(self, device_id: str) -> Optional[LogEntry]:
        """Get the entry with the highest timestamp for a device."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class CommandQueue(ABC):
    """Per-device mailbox of pending commands."""

    @abstractmethod
    async def enqueue(self, device_id: str, command: Command) -> Command:
        pass

    @abstractmethod
    async def drain(self, device_id: str) -> List[Command]:
        """Return the pending commands and clear the queue."""
        pass


class UserDirectory(ABC):
    """Username to account mapping."""

    @abstractmethod
    async def get(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """
        Add a new user.

        Raises:
            DuplicateUserException: If the username is already taken.
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        pass


class SessionStore(ABC):
    """Issues, resolves and expires bearer-token sessions."""

    @abstractmethod
    async def issue(self, username: str, role: UserRole) -> Session:
        pass

    @abstractmethod
    async def get(self, token: str) -> Optional[Session]:
        """Resolve a token, dropping it if it has expired."""
        pass

    @abstractmethod
    async def purge_expired(self) -> int:
        """Remove every expired session. Returns how many were removed."""
        pass
