"""
Device report endpoints.

Ingestion is public so devices can post without credentials; every read
path requires an authenticated operator and returns newest first.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..dependencies import get_current_session, get_log_service
from ..schemas import (
    ErrorResponse,
    LogCreateRequest,
    LogCreatedResponse,
    LogEntryResponse,
)
from ...application.services import LogService
from ...domain.entities import Session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Logs"])


@router.post(
    "/logs",
    response_model=LogCreatedResponse,
    response_model_exclude_none=True,
    summary="Ingest a device report",
    responses={400: {"model": ErrorResponse, "description": "Missing or invalid fields"}},
)
async def create_log(
    request: LogCreateRequest,
    service: LogService = Depends(get_log_service),
) -> LogCreatedResponse:
    """Store a report pushed by a device."""
    entry = await service.append(
        device_id=request.device_id,
        timestamp=request.timestamp,
        temperature=request.temperature,
        sensors=request.sensors,
        outputs=request.outputs,
    )
    return LogCreatedResponse(
        message="Log received",
        entry=LogEntryResponse.from_entity(entry),
    )


@router.get(
    "/logs",
    response_model=List[LogEntryResponse],
    response_model_exclude_none=True,
    summary="List reports",
    responses={401: {"model": ErrorResponse}},
)
async def list_logs(
    device_id: Optional[str] = Query(default=None, alias="deviceId"),
    limit: Optional[str] = Query(default=None, description="1-10000, default 1000"),
    service: LogService = Depends(get_log_service),
    session: Session = Depends(get_current_session),
) -> List[LogEntryResponse]:
    """
    List reports from every device, or one device via `deviceId`.

    An invalid `limit` falls back to the default instead of failing.
    """
    entries = await service.list_logs(device_id=device_id, limit=limit)
    return LogEntryResponse.from_entities(entries)


@router.get(
    "/logs/{device_id}",
    response_model=List[LogEntryResponse],
    response_model_exclude_none=True,
    summary="List reports for a device",
    responses={401: {"model": ErrorResponse}},
)
async def list_device_logs(
    device_id: str,
    service: LogService = Depends(get_log_service),
    session: Session = Depends(get_current_session),
) -> List[LogEntryResponse]:
    entries = await service.list_device_logs(device_id)
    return LogEntryResponse.from_entities(entries)


@router.get(
    "/status/{device_id}",
    response_model=LogEntryResponse,
    response_model_exclude_none=True,
    summary="Latest report for a device",
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse, "description": "Device has no reports"},
    },
)
async def device_status(
    device_id: str,
    service: LogService = Depends(get_log_service),
    session: Session = Depends(get_current_session),
) -> LogEntryResponse:
    entry = await service.latest(device_id)
    return LogEntryResponse.from_entity(entry)
