"""
User management endpoints (admin only).
"""
from typing import List

from fastapi import APIRouter, Depends

from ..dependencies import authorized_body, get_auth_service, require_admin
from ..schemas import (
    ErrorResponse,
    UserCreateRequest,
    UserCreatedResponse,
    UserResponse,
    json_request_body,
)
from ...application.services import AuthService
from ...domain.entities import Session

router = APIRouter(prefix="/users", tags=["Users"])

_admin_responses = {
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=UserCreatedResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Duplicate user or invalid role"},
        **_admin_responses,
    },
    openapi_extra={"requestBody": json_request_body(UserCreateRequest)},
)
async def create_user(
    request: UserCreateRequest = Depends(authorized_body(UserCreateRequest)),
    auth_service: AuthService = Depends(get_auth_service),
    session: Session = Depends(require_admin),
) -> UserCreatedResponse:
    user = await auth_service.create_user(
        actor=session,
        username=request.username,
        password=request.password,
        role=request.role,
    )
    return UserCreatedResponse(
        message=f"User '{user.username}' created",
        user=UserResponse.from_entity(user),
    )


@router.get("", response_model=List[UserResponse], responses=_admin_responses)
async def list_users(
    auth_service: AuthService = Depends(get_auth_service),
    session: Session = Depends(require_admin),
) -> List[UserResponse]:
    users = await auth_service.list_users()
    return [UserResponse.from_entity(u) for u in users]
