"""
External service interfaces (ports).
"""
from abc import ABC, abstractmethod

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class PasswordHasher(ABC):
    """Interface for password hashing service."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plain text password."""
        pass

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against its hash."""
        pass

    def burn(self, password: str) -> None:
        """Spend the cost of one verification without a real hash."""
        pass
