"""
In-memory store implementations.
"""
from .log_repository import LogRepository
from .command_repository import CommandRepository
from .user_repository import UserRepository
from .session_repository import SessionRepository

__all__ = [
    "LogRepository",
    "CommandRepository",
    "UserRepository",
    "SessionRepository",
]
