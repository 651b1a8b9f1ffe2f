"""
Health check endpoint.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ..dependencies import get_log_service
from ..schemas import HealthResponse
from ...application.services import LogService

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(service: LogService = Depends(get_log_service)) -> HealthResponse:
    """Report liveness and the number of retained reports."""
    return HealthResponse(
        status="ok",
        logs_count=await service.count(),
        time=datetime.now(timezone.utc).isoformat(),
    )
