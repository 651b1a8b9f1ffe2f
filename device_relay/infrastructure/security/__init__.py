"""
Security infrastructure components.
"""
from .password_hasher import BcryptPasswordHasher

__all__ = [
    'BcryptPasswordHasher',
]
