"""Application-layer errors – raised when enforcing a resolved context."""

from __future__ import annotations

from typing import Any

from claims_rbac.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """No authorization context is available for the caller."""

    default_code = "unauthorized"


class ForbiddenError(ApplicationError):
    """The resolved context does not permit the requested operation."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        permission: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.permission = permission


__all__ = ["ApplicationError", "ForbiddenError", "UnauthorizedError"]
