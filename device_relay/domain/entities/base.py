"""
Base helpers shared by the relay domain entities.
"""
import time
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return current UTC timestamp."""
    return datetime.now(timezone.utc)


def epoch_seconds() -> int:
    """Return current server time in whole seconds since the epoch."""
    return int(time.time())
