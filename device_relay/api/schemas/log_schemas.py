"""
Pydantic schemas for device report endpoints.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from .base import CamelModel
from ...domain.entities import LogEntry


class LogCreateRequest(CamelModel):
    """
    Report pushed by a device.

    `deviceId` and `timestamp` are checked by the log service so that every
    malformed report gets the same error shape.
    """
    device_id: Any = Field(default=None, description="Reporting device identifier")
    timestamp: Any = Field(default=None, description="Device clock, seconds since epoch")
    temperature: Any = None
    sensors: Optional[Dict[str, Any]] = None
    outputs: Optional[Dict[str, Any]] = None


class LogEntryResponse(CamelModel):
    """A stored device report."""
    device_id: str
    timestamp: Union[int, float]
    received_at: int
    temperature: Optional[Union[int, float]] = None
    sensors: Optional[Dict[str, Any]] = None
    outputs: Optional[Dict[str, Any]] = None

    @classmethod
    def from_entity(cls, entry: LogEntry) -> "LogEntryResponse":
        return cls.model_validate(entry.to_dict())

    @classmethod
    def from_entities(cls, entries: List[LogEntry]) -> List["LogEntryResponse"]:
        return [cls.from_entity(e) for e in entries]


class LogCreatedResponse(CamelModel):
    """Acknowledgement sent back to the device."""
    message: str
    entry: LogEntryResponse


class HealthResponse(CamelModel):
    """Service health summary."""
    status: str
    logs_count: int
    time: str
