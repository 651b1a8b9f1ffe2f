# Application Services - device reports, command relay, operator auth

from .log_service import LogService
from .command_service import CommandService
from .auth_service import AuthService

__all__ = [
    "LogService",
    "CommandService",
    "AuthService",
]
