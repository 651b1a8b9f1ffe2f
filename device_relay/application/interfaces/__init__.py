"""
Application interfaces (ports).
"""
from .repositories import LogStore, CommandQueue, UserDirectory, SessionStore
from .services import MAX_PASSWORD_BYTES, PasswordHasher

__all__ = [
    'LogStore',
    'CommandQueue',
    'UserDirectory',
    'SessionStore',
    'PasswordHasher',
    'MAX_PASSWORD_BYTES',
]
