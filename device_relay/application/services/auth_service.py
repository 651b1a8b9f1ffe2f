"""
Authentication Service.

Handles operator login, token resolution and account management.
"""
import asyncio
import logging
from typing import Any, List, Optional

from ..interfaces import MAX_PASSWORD_BYTES, PasswordHasher, SessionStore, UserDirectory
from ...domain.entities import Session, User, UserRole
from ...domain.exceptions import (
    AuthorizationException,
    DuplicateUserException,
    InvalidCredentialsException,
    InvalidRoleException,
    ValidationException,
)

logger = logging.getLogger(__name__)


def parse_role(value: Any) -> UserRole:
    """
    Resolve a role name.

    Raises:
        InvalidRoleException: If the value is not one of the known roles.
    """
    if isinstance(value, UserRole):
        return value
    try:
        return UserRole(value)
    except ValueError:
        raise InvalidRoleException(value, UserRole.values())


class AuthService:
    """
    Service for operator authentication.

    Handles:
    - Login and session issuance
    - Token resolution (with lazy expiry)
    - User creation by administrators
    """

    def __init__(
        self,
        user_directory: UserDirectory,
        session_store: SessionStore,
        password_hasher: PasswordHasher,
    ):
        self._users = user_directory
        self._sessions = session_store
        self._hasher = password_hasher

    # =========================================================================
    # Login
    # =========================================================================

    async def login(self, username: str, password: str) -> Session:
        """
        Authenticate credentials and open a session.

        Args:
            username: Account name.
            password: Plain-text password.

        Returns:
            A new Session carrying the token and role.

        Raises:
            InvalidCredentialsException: If the user is unknown or the password is wrong.
        """
        user = await self._users.get(username) if username else None

        if user is None:
            # Pay for a hash check anyway so unknown users are not cheaper to probe
            await asyncio.to_thread(self._hasher.burn, password or "")
            logger.warning(f"Failed login for unknown user '{username}'")
            raise InvalidCredentialsException()

        if not await asyncio.to_thread(self._hasher.verify, password or "", user.password_hash):
            logger.warning(f"Failed login for '{username}': bad password")
            raise InvalidCredentialsException()

        session = await self._sessions.issue(user.username, user.role)
        logger.info(f"User '{username}' logged in (role={user.role.value})")
        return session

    # =========================================================================
    # Token resolution
    # =========================================================================

    async def authenticate(self, token: Optional[str]) -> Optional[Session]:
        """
        Resolve a bearer token.

        Returns:
            The live Session, or None if the token is absent, unknown or expired.
        """
        if not token:
            return None
        return await self._sessions.get(token)

    async def purge_expired_sessions(self) -> int:
        removed = await self._sessions.purge_expired()
        if removed:
            logger.info(f"Purged {removed} expired session(s)")
        return removed

    # =========================================================================
    # User management
    # =========================================================================

    async def create_user(
        self,
        actor: Session,
        username: Any,
        password: Any,
        role: Any,
    ) -> User:
        """
        Create an operator account.

        Args:
            actor: Session of the caller; must hold the admin role.
            username: New account name.
            password: Plain-text password (stored hashed).
            role: Role name.

        Returns:
            The created User.

        Raises:
            AuthorizationException: If the caller is not an admin.
            ValidationException: If username or password are missing.
            InvalidRoleException: If the role is unknown.
            DuplicateUserException: If the username is taken.
        """
        if actor is None or not actor.has_role(UserRole.ADMIN):
            raise AuthorizationException(
                "Only administrators can create users",
                required_roles=[UserRole.ADMIN.value],
            )

        errors = ValidationException("Invalid user: send { username, password, role }")
        if not isinstance(username, str) or not username.strip():
            errors.add_error('username', 'username is required')
        if not isinstance(password, str) or not password:
            errors.add_error('password', 'password is required')
        elif len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
            errors.add_error('password', f'password cannot exceed {MAX_PASSWORD_BYTES} bytes')
        if errors.has_errors():
            raise errors

        user_role = parse_role(role)
        username = username.strip()

        if await self._users.get(username) is not None:
            raise DuplicateUserException(username)

        user = User(
            username=username,
            password_hash=await asyncio.to_thread(self._hasher.hash, password),
            role=user_role,
        )
        created = await self._users.add(user)

        logger.info(f"User '{actor.username}' created user '{username}' (role={user_role.value})")
        return created

    async def list_users(self) -> List[User]:
        return await self._users.list_all()
