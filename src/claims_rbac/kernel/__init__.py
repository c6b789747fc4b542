"""Kernel – framework-agnostic policy model and resolution."""

from claims_rbac.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    InvalidArgumentError,
    UnauthorizedError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "InvalidArgumentError",
    "UnauthorizedError",
]
