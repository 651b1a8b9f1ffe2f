"""
In-memory command queue.

One FIFO mailbox per device. Draining a mailbox hands back its contents and
empties it in the same critical section.
"""
import asyncio
import logging
from collections import defaultdict, deque
from typing import Deque, Dict, List, Optional

from ...application.interfaces import CommandQueue
from ...domain.entities import Command

logger = logging.getLogger(__name__)

DEFAULT_MAX_QUEUE_LENGTH = 100


class CommandRepository(CommandQueue):
    """
    Per-device command mailboxes.

    A mailbox holds at most `max_queue_length` commands; when a device stops
    polling, the oldest pending commands are dropped first.
    """

    def __init__(self, max_queue_length: Optional[int] = DEFAULT_MAX_QUEUE_LENGTH):
        if max_queue_length is not None and max_queue_length < 1:
            raise ValueError("max_queue_length must be at least 1")
        self._max_queue_length = max_queue_length
        self._queues: Dict[str, Deque[Command]] = defaultdict(deque)
        self._lock = asyncio.Lock()

    async def enqueue(self, device_id: str, command: Command) -> Command:
        """
        Append a command to the device mailbox.

        Args:
            device_id: Target device.
            command: Command to deliver.

        Returns:
            The queued command.
        """
        async with self._lock:
            queue = self._queues[device_id]
            queue.append(command)

            if self._max_queue_length is not None:
                dropped = 0
                while len(queue) > self._max_queue_length:
                    queue.popleft()
                    dropped += 1
                if dropped:
                    logger.warning(
                        f"Command queue for {device_id} exceeded "
                        f"{self._max_queue_length} entries, dropped {dropped} oldest"
                    )

            return command

    async def drain(self, device_id: str) -> List[Command]:
        """
        Return and clear the pending commands for a device.

        Delivery is at-most-once: drained commands are never redelivered.
        """
        async with self._lock:
            queue = self._queues.pop(device_id, None)
            return list(queue) if queue else []
