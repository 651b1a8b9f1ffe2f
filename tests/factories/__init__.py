"""
Test data factories.

Provides factory classes for generating test data.
"""
from .log_factory import LogEntryFactory, ReadingLogEntryFactory, LogPayloadFactory
from .command_factory import CommandFactory, ControlPayloadFactory
from .user_factory import (
    UserFactory,
    AdminUserFactory,
    SessionFactory,
    AdminSessionFactory,
    DEFAULT_TEST_PASSWORD,
    fast_hasher,
)

__all__ = [
    "LogEntryFactory",
    "ReadingLogEntryFactory",
    "LogPayloadFactory",
    "CommandFactory",
    "ControlPayloadFactory",
    "UserFactory",
    "AdminUserFactory",
    "SessionFactory",
    "AdminSessionFactory",
    "DEFAULT_TEST_PASSWORD",
    "fast_hasher",
]
