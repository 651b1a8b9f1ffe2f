"""
Command Service.

Queues output-control commands for devices and hands them out when the
device polls.
"""
import logging
from typing import Any, List

from ..interfaces import CommandQueue
from ...domain.entities import Command
from ...domain.exceptions import ValidationException

logger = logging.getLogger(__name__)

TRUTHY_STRINGS = ("1", "true", "yes", "y", "on")


def normalize_state(value: Any) -> int:
    """
    Normalize a requested output state to 0 or 1.

    Strings are matched against common truthy spellings; anything else
    follows Python truthiness.
    """
    if isinstance(value, str):
        return 1 if value.strip().lower() in TRUTHY_STRINGS else 0
    return 1 if value else 0


def parse_pin(value: Any):
    """Return `value` as an int pin number, or None if it is not an integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class CommandService:
    """
    Application service for device commands.

    Delivery is at-most-once: a drained command is gone even if the device
    never applies it.
    """

    def __init__(self, command_queue: CommandQueue):
        self._command_queue = command_queue

    async def enqueue(self, device_id: Any, pin: Any, state: Any) -> Command:
        """
        Queue a command for a device.

        Args:
            device_id: Target device.
            pin: Output pin number.
            state: Desired state; any truthy/falsy value.

        Returns:
            The queued Command with its state normalized to 0/1.

        Raises:
            ValidationException: If the device, pin or state is missing or invalid.
        """
        errors = ValidationException("Invalid command: send { deviceId, pin, state }")

        if not isinstance(device_id, str) or not device_id.strip():
            errors.add_error('deviceId', 'deviceId is required and must be a non-empty string')

        parsed_pin = parse_pin(pin)
        if parsed_pin is None:
            errors.add_error('pin', 'pin must be an integer')

        if state is None:
            errors.add_error('state', 'state is required')

        if errors.has_errors():
            raise errors

        command = Command(pin=parsed_pin, state=normalize_state(state))
        await self._command_queue.enqueue(device_id, command)

        logger.info(f"Queued command pin={command.pin} state={command.state} for {device_id}")
        return command

    async def drain(self, device_id: str) -> List[Command]:
        """Hand out and clear every pending command for a device."""
        commands = await self._command_queue.drain(device_id)
        if commands:
            logger.info(f"Delivered {len(commands)} command(s) to {device_id}")
        return commands
