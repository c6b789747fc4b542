"""Kernel security – per-request AuthorizationContext and ``@require_operation``.

The resolved context lives in a :mod:`contextvars` variable so each asyncio
task (or thread) sees its own.
"""

from __future__ import annotations

import contextvars
import functools
import inspect
from typing import Any, Callable, TypeVar

from claims_rbac.kernel.errors.application import UnauthorizedError
from claims_rbac.kernel.security.authorization import AuthorizationContext
from claims_rbac.kernel.security.items import Operation

F = TypeVar("F", bound=Callable[..., Any])

_VAR: contextvars.ContextVar[AuthorizationContext | None] = contextvars.ContextVar(
    "_authorization_context", default=None
)


class CurrentAuthorization:
    """Store and retrieve the current :class:`AuthorizationContext`."""

    @staticmethod
    def get_current() -> AuthorizationContext | None:
        return _VAR.get()

    @staticmethod
    def set_current(
        context: AuthorizationContext,
    ) -> contextvars.Token[AuthorizationContext | None]:
        """Set the current context and return a reset token."""
        return _VAR.set(context)

    @staticmethod
    def reset(token: contextvars.Token[AuthorizationContext | None]) -> None:
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        _VAR.set(None)

    @staticmethod
    def require() -> AuthorizationContext:
        """Return the current context or raise ``UnauthorizedError``."""
        context = _VAR.get()
        if context is None:
            raise UnauthorizedError("No authorization context in scope")
        return context


def require_operation(operation: Operation) -> Callable[[F], F]:
    """Decorator that demands *operation* on the current context.

    Works on both async and sync callables.  Raises
    :class:`UnauthorizedError` if no context is set and
    :class:`ForbiddenError` if the context does not permit *operation*.

    Example::

        @require_operation(Operation("orders:cancel"))
        async def cancel_order(cmd: CancelOrder) -> None:
            ...
    """

    def decorator(fn: F) -> F:
        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                CurrentAuthorization.require().demand(operation)
                return await fn(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            CurrentAuthorization.require().demand(operation)
            return fn(*args, **kwargs)

        return sync_wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["CurrentAuthorization", "require_operation"]
