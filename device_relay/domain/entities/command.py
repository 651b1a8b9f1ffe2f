"""
Output-control command entity.

Commands are queued per device by an administrator and consumed by the
device on its next poll.
"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Command:
    """A pending instruction to drive output `pin` to `state` (0 or 1)."""
    pin: int
    state: int

    def __post_init__(self):
        if self.state not in (0, 1):
            raise ValueError(f"Command state must be 0 or 1, got {self.state!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {'pin': self.pin, 'state': self.state}
