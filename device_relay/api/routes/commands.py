"""
Command relay endpoints.

Administrators queue output changes; devices poll and consume them.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends

from ..dependencies import authorized_body, get_command_service, require_admin
from ..schemas import (
    CommandResponse,
    ControlRequest,
    ControlResponse,
    ErrorResponse,
    json_request_body,
)
from ...application.services import CommandService
from ...domain.entities import Session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Commands"])


@router.post(
    "/control",
    response_model=ControlResponse,
    summary="Queue an output command",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid device, pin or state"},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
    },
    openapi_extra={"requestBody": json_request_body(ControlRequest)},
)
async def queue_command(
    request: ControlRequest = Depends(authorized_body(ControlRequest)),
    service: CommandService = Depends(get_command_service),
    session: Session = Depends(require_admin),
) -> ControlResponse:
    command = await service.enqueue(
        device_id=request.device_id,
        pin=request.pin,
        state=request.state,
    )
    return ControlResponse(
        message=f"Command queued for {request.device_id}",
        command=CommandResponse.from_entity(command),
    )


@router.get(
    "/commands/{device_id}",
    response_model=List[CommandResponse],
    summary="Fetch and clear pending commands",
)
async def fetch_commands(
    device_id: str,
    service: CommandService = Depends(get_command_service),
) -> List[CommandResponse]:
    """
    Return the pending commands for a device and clear its queue.

    Commands are delivered once; the device must apply them on receipt.
    """
    commands = await service.drain(device_id)
    return [CommandResponse.from_entity(c) for c in commands]
