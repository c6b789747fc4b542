"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── InvalidArgumentError
    └── ApplicationError     (application.py)
        ├── UnauthorizedError
        └── ForbiddenError
"""

from claims_rbac.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    UnauthorizedError,
)
from claims_rbac.kernel.errors.base import BaseError
from claims_rbac.kernel.errors.domain import DomainError, InvalidArgumentError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "InvalidArgumentError",
    "UnauthorizedError",
]
