"""
Authentication endpoints.
"""
from fastapi import APIRouter, Depends

from ..dependencies import get_auth_service
from ..schemas import ErrorResponse, LoginRequest, LoginResponse
from ...application.services import AuthService

router = APIRouter(tags=["Authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse, "description": "Invalid credentials"}},
)
async def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Authenticate an operator and return a bearer token.

    Tokens expire a fixed time after login; log in again to get a new one.
    """
    session = await auth_service.login(request.username, request.password)
    return LoginResponse(
        token=session.token,
        role=session.role.value,
        expires_at=session.expire_at,
    )
