"""
FastAPI dependency injection providers.

The stores and services live on a ServiceContainer attached to
`app.state`; request handlers reach them only through these providers.
This module is also the authorization gate: routes declare
`get_current_session` (any authenticated caller) or a RoleChecker.
"""
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Iterable, List, Optional, Type, TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ValidationError

from ..application.services import AuthService, CommandService, LogService
from ..config import AppSettings
from ..domain.entities import Session, User, UserRole
from ..domain.exceptions import AuthenticationException, AuthorizationException
from ..infrastructure.memory import (
    CommandRepository,
    LogRepository,
    SessionRepository,
    UserRepository,
)
from ..infrastructure.security import BcryptPasswordHasher

logger = logging.getLogger(__name__)

# Security scheme; missing credentials are reported by get_current_session
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class ServiceContainer:
    """Process-wide stores and the services built on them."""
    settings: AppSettings
    log_service: LogService
    command_service: CommandService
    auth_service: AuthService


def build_container(settings: AppSettings) -> ServiceContainer:
    """
    Create the stores and services for one application instance.

    The configured admin account is seeded into the user directory.
    """
    hasher = BcryptPasswordHasher(rounds=settings.auth.bcrypt_rounds)

    seed_users: List[User] = [
        User(
            username=settings.auth.admin_username,
            password_hash=hasher.hash(settings.auth.admin_password),
            role=UserRole.ADMIN,
        )
    ]
    logger.info(f"Seeded admin account '{settings.auth.admin_username}'")

    log_store = LogRepository(max_entries=settings.store.max_log_entries)
    command_queue = CommandRepository(max_queue_length=settings.store.max_queue_length)
    session_store = SessionRepository(
        window=timedelta(hours=settings.auth.session_ttl_hours),
    )
    user_directory = UserRepository(seed_users)

    return ServiceContainer(
        settings=settings,
        log_service=LogService(
            log_store,
            default_limit=settings.store.default_list_limit,
            max_limit=settings.store.max_list_limit,
        ),
        command_service=CommandService(command_queue),
        auth_service=AuthService(user_directory, session_store, hasher),
    )


def get_container(request: Request) -> ServiceContainer:
    """Get the container of the application serving this request."""
    return request.app.state.container


def get_log_service(container: ServiceContainer = Depends(get_container)) -> LogService:
    return container.log_service


def get_command_service(container: ServiceContainer = Depends(get_container)) -> CommandService:
    return container.command_service


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> AuthService:
    return container.auth_service


async def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> Session:
    """
    Get the session of the calling operator.

    Raises:
        AuthenticationException: If no token was sent, or it is unknown or expired.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("Missing bearer token")

    session = await auth_service.authenticate(credentials.credentials)
    if session is None:
        raise AuthenticationException("Invalid or expired token")

    return session


class RoleChecker:
    """
    Dependency for checking session roles.

    Authentication runs first, so a request without a valid token is
    always rejected as unauthorized rather than forbidden.

    Usage:
        @router.get("/users")
        async def list_users(session: Session = Depends(require_admin)):
            ...
    """

    def __init__(self, allowed_roles: Iterable[UserRole]):
        self.allowed_roles = list(allowed_roles)

    async def __call__(
        self,
        session: Session = Depends(get_current_session),
    ) -> Session:
        if not session.has_role(*self.allowed_roles):
            raise AuthorizationException(
                "Insufficient permissions",
                required_roles=[r.value for r in self.allowed_roles],
            )
        return session


# Common role checkers
require_admin = RoleChecker([UserRole.ADMIN])


ModelT = TypeVar("ModelT", bound=BaseModel)


def authorized_body(
    model: Type[ModelT],
    gate: Callable[..., Any] = require_admin,
) -> Callable[..., Any]:
    """
    Build a dependency that parses the JSON body only after `gate` passes.

    FastAPI decodes declared body parameters before any dependency runs, so
    a protected route that declared its body directly would answer a
    malformed request with 400 even when no token was sent. Routes behind
    the gate read their body through this dependency instead.

    Usage:
        @router.post("/control")
        async def queue_command(
            request: ControlRequest = Depends(authorized_body(ControlRequest)),
        ):
            ...
    """

    async def parse_body(
        request: Request,
        session: Session = Depends(gate),
    ) -> ModelT:
        try:
            payload = await request.json()
        except ValueError:
            raise RequestValidationError([{
                'type': 'json_invalid',
                'loc': ('body',),
                'msg': 'JSON decode error',
                'input': {},
            }])

        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors(include_url=False))

    return parse_body
