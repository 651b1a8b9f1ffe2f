# Domain Exceptions
from .domain_exceptions import (
    DomainException,
    ValidationException,
    EntityNotFoundException,
    AuthenticationException,
    InvalidCredentialsException,
    AuthorizationException,
    DuplicateUserException,
    InvalidRoleException,
)

__all__ = [
    'DomainException',
    'ValidationException',
    'EntityNotFoundException',
    'AuthenticationException',
    'InvalidCredentialsException',
    'AuthorizationException',
    'DuplicateUserException',
    'InvalidRoleException',
]
