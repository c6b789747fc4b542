"""Argument guards raising :class:`InvalidArgumentError`."""

from __future__ import annotations

from typing import TypeVar

from claims_rbac.kernel.errors.domain import InvalidArgumentError

T = TypeVar("T")


class Guard:
    """Namespace for argument assertions."""

    @staticmethod
    def not_none(value: T | None, name: str) -> T:
        """Assert *value* is not None, returning it typed."""
        if value is None:
            raise InvalidArgumentError(name)
        return value

    @staticmethod
    def not_blank(value: str | None, name: str) -> str:
        """Assert *value* is a non-empty, non-whitespace string."""
        if value is None:
            raise InvalidArgumentError(name)
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentError(name, f"Argument '{name}' must be a non-empty string")
        return value


__all__ = ["Guard"]
