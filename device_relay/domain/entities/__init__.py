"""
Domain entities for the device relay.
"""
from .base import utc_now, epoch_seconds
from .log_entry import LogEntry, Timestamp
from .command import Command
from .user import User, UserRole
from .session import Session, DEFAULT_SESSION_WINDOW

__all__ = [
    # Base
    "utc_now",
    "epoch_seconds",
    # Telemetry
    "LogEntry",
    "Timestamp",
    # Commands
    "Command",
    # Auth
    "User",
    "UserRole",
    "Session",
    "DEFAULT_SESSION_WINDOW",
]
