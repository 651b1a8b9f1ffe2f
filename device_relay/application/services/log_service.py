"""
Log Service.

Validation boundary for device reports, and the read paths operators use
to inspect device history.
"""
import logging
import math
from typing import Any, List, Optional

from ..interfaces import LogStore
from ...domain.entities import LogEntry, Timestamp, epoch_seconds
from ...domain.exceptions import EntityNotFoundException, ValidationException

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 1000
MAX_LIST_LIMIT = 10000


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite(value: Any) -> bool:
    # ints have arbitrary precision and may not fit in a float
    return isinstance(value, int) or math.isfinite(value)


def parse_timestamp(value: Any) -> Optional[Timestamp]:
    """
    Coerce a device timestamp.

    Numbers and numeric strings are accepted. Returns None when the value is
    missing, not numeric, not finite or not positive.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                return None
    elif not _is_number(value):
        return None

    if not _is_finite(value) or value <= 0:
        return None

    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class LogService:
    """
    Application service for device reports.

    Everything passed to the store has already been validated here.
    """

    def __init__(
        self,
        log_store: LogStore,
        default_limit: int = DEFAULT_LIST_LIMIT,
        max_limit: int = MAX_LIST_LIMIT,
    ):
        self._log_store = log_store
        self._default_limit = default_limit
        self._max_limit = max_limit

    # =========================================================================
    # Ingestion
    # =========================================================================

    async def append(
        self,
        device_id: Any,
        timestamp: Any,
        temperature: Any = None,
        sensors: Any = None,
        outputs: Any = None,
    ) -> LogEntry:
        """
        Validate and store a device report.

        Args:
            device_id: Reporting device identifier.
            timestamp: Device clock, seconds since epoch.
            temperature: Optional temperature reading.
            sensors: Optional mapping of sensor readings.
            outputs: Optional mapping of pin to output state.

        Returns:
            The stored LogEntry, with `received_at` set to server time.

        Raises:
            ValidationException: If the report is malformed.
        """
        errors = ValidationException("Invalid payload: send { deviceId, timestamp }")

        if not isinstance(device_id, str) or not device_id.strip():
            errors.add_error('deviceId', 'deviceId is required and must be a non-empty string')

        parsed_ts = parse_timestamp(timestamp)
        if parsed_ts is None:
            errors.add_error('timestamp', 'timestamp must be a positive, finite number')

        if temperature is not None and not _is_number(temperature):
            errors.add_error('temperature', 'temperature must be a number')
        elif temperature is not None and not _is_finite(temperature):
            errors.add_error('temperature', 'temperature must be finite')

        if sensors is not None and not isinstance(sensors, dict):
            errors.add_error('sensors', 'sensors must be an object')

        if outputs is not None and not isinstance(outputs, dict):
            errors.add_error('outputs', 'outputs must be an object')

        if errors.has_errors():
            raise errors

        entry = LogEntry(
            device_id=device_id,
            timestamp=parsed_ts,
            received_at=epoch_seconds(),
            temperature=temperature,
            sensors=dict(sensors) if sensors is not None else None,
            outputs=dict(outputs) if outputs is not None else None,
        )

        stored = await self._log_store.append(entry)
        logger.debug(f"Stored report from {device_id} (ts={parsed_ts})")
        return stored

    # =========================================================================
    # Queries
    # =========================================================================

    def resolve_limit(self, raw: Any) -> int:
        """
        Turn a client-supplied limit into a usable one.

        Missing, unparsable and zero values fall back to the default; other
        values are clamped into [1, max_limit].
        """
        if raw is None or isinstance(raw, bool):
            return self._default_limit
        try:
            value = float(raw)
        except OverflowError:
            return self._max_limit if raw > 0 else 1
        except (TypeError, ValueError):
            return self._default_limit
        if not math.isfinite(value) or value == 0:
            return self._default_limit
        return max(1, min(int(value), self._max_limit))

    async def list_logs(
        self,
        device_id: Optional[str] = None,
        limit: Any = None,
    ) -> List[LogEntry]:
        """List reports newest first, optionally for a single device."""
        return await self._log_store.list_all(
            device_id=device_id or None,
            limit=self.resolve_limit(limit),
        )

    async def list_device_logs(self, device_id: str) -> List[LogEntry]:
        """List every retained report for a device, newest first."""
        return await self._log_store.list_by_device(device_id)

    async def latest(self, device_id: str) -> LogEntry:
        """
        Get the most recent report for a device.

        Raises:
            EntityNotFoundException: If the device has never reported.
        """
        entry = await self._log_store.latest(device_id)
        if entry is None:
            raise EntityNotFoundException(
                "Device",
                device_id,
                message=f"No reports found for device '{device_id}'",
            )
        return entry

    async def count(self) -> int:
        return await self._log_store.count()
