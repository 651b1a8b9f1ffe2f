"""
API schemas for the relay service.
"""
from .base import CamelModel, ErrorResponse, json_request_body
from .log_schemas import (
    LogCreateRequest,
    LogEntryResponse,
    LogCreatedResponse,
    HealthResponse,
)
from .command_schemas import (
    ControlRequest,
    CommandResponse,
    ControlResponse,
)
from .auth_schemas import (
    LoginRequest,
    LoginResponse,
    UserCreateRequest,
    UserResponse,
    UserCreatedResponse,
)

__all__ = [
    # Base
    "CamelModel",
    "ErrorResponse",
    "json_request_body",
    # Logs
    "LogCreateRequest",
    "LogEntryResponse",
    "LogCreatedResponse",
    "HealthResponse",
    # Commands
    "ControlRequest",
    "CommandResponse",
    "ControlResponse",
    # Auth
    "LoginRequest",
    "LoginResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserCreatedResponse",
]
