"""
In-memory session store.

Sessions expire a fixed window after issuance. Expired sessions are removed
lazily when looked up, and in bulk by `purge_expired`.
"""
import asyncio
import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from ...application.interfaces import SessionStore
from ...domain.entities import DEFAULT_SESSION_WINDOW, Session, UserRole, utc_now

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


class SessionRepository(SessionStore):
    """
    Token-keyed session table.

    Args:
        window: Lifetime of a session from issuance.
        clock: Source of the current UTC time.
    """

    def __init__(
        self,
        window: timedelta = DEFAULT_SESSION_WINDOW,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._window = window
        self._clock = clock
        self._sessions: Dict[str, Session] = {}
        self._lock = asyncio.Lock()

    async def issue(self, username: str, role: UserRole) -> Session:
        """Create a session with an unguessable token."""
        now = self._clock()
        session = Session(
            token=secrets.token_urlsafe(TOKEN_BYTES),
            username=username,
            role=role,
            created_at=now,
            expire_at=now + self._window,
        )
        async with self._lock:
            self._sessions[session.token] = session
        return session

    async def get(self, token: str) -> Optional[Session]:
        if not token:
            return None

        async with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session.is_expired(self._clock()):
                del self._sessions[token]
                logger.debug(f"Dropped expired session for {session.username}")
                return None
            return session

    async def purge_expired(self) -> int:
        now = self._clock()
        async with self._lock:
            expired = [t for t, s in self._sessions.items() if s.is_expired(now)]
            for token in expired:
                del self._sessions[token]
        return len(expired)
