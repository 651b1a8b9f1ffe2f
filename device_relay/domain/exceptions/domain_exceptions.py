"""
Domain Exceptions - Custom exceptions for relay-specific errors.

Each exception carries a stable error code; the API layer maps exception
classes to HTTP status codes.
"""
from typing import Any, Dict, Iterable, Optional


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    All domain exceptions should inherit from this class to allow
    for consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            'error': self.code,
            'message': self.message,
            'details': self.details
        }


class ValidationException(DomainException):
    """
    Raised when request validation fails.

    Can contain multiple validation errors for different fields.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[Dict[str, list]] = None
    ):
        self.errors = errors or {}
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            details={'validation_errors': self.errors}
        )

    def add_error(self, field: str, error: str) -> None:
        """Add a validation error for a specific field."""
        if field not in self.errors:
            self.errors[field] = []
        self.errors[field].append(error)
        self.details['validation_errors'] = self.errors

    def has_errors(self) -> bool:
        return bool(self.errors)


class EntityNotFoundException(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        entity_type: str,
        entity_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} not found"
        if entity_id and not message:
            msg = f"{entity_type} with id '{entity_id}' not found"
        super().__init__(
            message=msg,
            code='ENTITY_NOT_FOUND',
            details={'entity_type': entity_type, 'entity_id': entity_id}
        )


class AuthenticationException(DomainException):
    """Raised when a request carries no valid session token."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message=message, code='UNAUTHORIZED')


class InvalidCredentialsException(AuthenticationException):
    """Raised when a login attempt fails."""

    def __init__(self):
        super().__init__(message="Invalid username or password")
        self.code = 'INVALID_CREDENTIALS'


class AuthorizationException(DomainException):
    """Raised when an authenticated caller lacks permission for an operation."""

    def __init__(
        self,
        message: str = "Not authorized to perform this action",
        required_roles: Optional[Iterable[str]] = None,
    ):
        details = {}
        if required_roles:
            details['required_roles'] = list(required_roles)
        super().__init__(
            message=message,
            code='FORBIDDEN',
            details=details
        )


class DuplicateUserException(DomainException):
    """Raised when attempting to create a user that already exists."""

    def __init__(self, username: str):
        super().__init__(
            message=f"User '{username}' already exists",
            code='DUPLICATE_USER',
            details={'username': username}
        )


class InvalidRoleException(DomainException):
    """Raised when a role name is not part of the closed role set."""

    def __init__(self, role: Any, allowed: Iterable[str]):
        allowed = list(allowed)
        super().__init__(
            message=f"Invalid role '{role}'. Allowed roles: {', '.join(allowed)}",
            code='INVALID_ROLE',
            details={'role': str(role), 'allowed_roles': allowed}
        )
