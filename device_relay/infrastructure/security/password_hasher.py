"""
Password hashing implementation using bcrypt.
"""
import bcrypt

from ...application.interfaces.services import MAX_PASSWORD_BYTES, PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """Bcrypt implementation of password hasher."""

    def __init__(self, rounds: int = 12):
        """
        Initialize hasher with work factor.

        Args:
            rounds: Number of bcrypt rounds (4-31).
        """
        self._rounds = rounds
        self._dummy_hash: bytes = b""

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt."""
        password_bytes = password.encode('utf-8')
        if len(password_bytes) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password exceeds {MAX_PASSWORD_BYTES} bytes")
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password_bytes, salt)
        return hashed.decode('utf-8')

    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against a hash."""
        try:
            password_bytes = password.encode('utf-8')
            hashed_bytes = hashed.encode('utf-8')
            return bcrypt.checkpw(password_bytes, hashed_bytes)
        except (ValueError, TypeError):
            return False

    def burn(self, password: str) -> None:
        """
        Run one verification against a throwaway hash.

        Used for unknown usernames so that a failed login costs the same
        whether or not the account exists.
        """
        if not self._dummy_hash:
            self._dummy_hash = bcrypt.hashpw(b"x", bcrypt.gensalt(rounds=self._rounds))
        self.verify(password, self._dummy_hash.decode('utf-8'))
