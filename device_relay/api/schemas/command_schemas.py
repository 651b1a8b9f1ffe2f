"""
Pydantic schemas for command endpoints.
"""
from typing import Any

from pydantic import Field

from .base import CamelModel
from ...domain.entities import Command


class ControlRequest(CamelModel):
    """Request to queue an output change for a device."""
    device_id: Any = Field(default=None, description="Target device identifier")
    pin: Any = Field(default=None, description="Output pin number")
    state: Any = Field(default=None, description="Desired state; truthy means on")


class CommandResponse(CamelModel):
    """A queued command as delivered to the device."""
    pin: int
    state: int

    @classmethod
    def from_entity(cls, command: Command) -> "CommandResponse":
        return cls.model_validate(command.to_dict())


class ControlResponse(CamelModel):
    """Acknowledgement for a queued command."""
    message: str
    command: CommandResponse
