"""Domain errors – policy model rule violations."""

from __future__ import annotations

from typing import Any

from claims_rbac.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a policy model rule is violated."""

    default_code = "domain_error"


class InvalidArgumentError(DomainError, ValueError):
    """A caller passed an absent or malformed argument.

    ``argument`` names the offending parameter (``name``, ``claim``,
    ``item``, ``identity``, ``allowed_operations``).
    """

    default_code = "invalid_argument"

    def __init__(
        self,
        argument: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = {"argument": argument, **(kwargs.pop("detail", None) or {})}
        super().__init__(
            message or f"Argument '{argument}' must not be None",
            detail=detail,
            **kwargs,
        )
        self.argument = argument


__all__ = ["DomainError", "InvalidArgumentError"]
