"""
Device report entity.

A LogEntry is one timestamped status submission from a device. Entries are
immutable once created; the log store only appends and evicts.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from .base import epoch_seconds


Timestamp = Union[int, float]


@dataclass(frozen=True)
class LogEntry:
    """
    A single device report.

    `timestamp` is the device clock (seconds since epoch). `received_at` is
    assigned by the server at ingestion and is never taken from the client.
    """
    device_id: str
    timestamp: Timestamp
    received_at: int = field(default_factory=epoch_seconds)
    temperature: Optional[Union[int, float]] = None
    sensors: Optional[Dict[str, Any]] = None
    outputs: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the wire (camelCase) field names."""
        return {
            'deviceId': self.device_id,
            'timestamp': self.timestamp,
            'receivedAt': self.received_at,
            'temperature': self.temperature,
            'sensors': self.sensors,
            'outputs': self.outputs,
        }
