"""Kernel security – Authorization bindings and AuthorizationContext."""

from __future__ import annotations

import dataclasses
from typing import Iterable, Iterator

from claims_rbac.kernel.errors.application import ForbiddenError
from claims_rbac.kernel.guards import Guard
from claims_rbac.kernel.security.claims import ClaimLike, claims_equal
from claims_rbac.kernel.security.items import Item, Operation, flatten


@dataclasses.dataclass(frozen=True)
class Authorization:
    """Binds one claim to one item.

    Registered as an *allow* binding, an identity holding ``claim`` may
    perform everything ``item`` flattens to.  Registered as a *deny*
    binding, it may not.
    """

    claim: ClaimLike
    item: Item

    def __post_init__(self) -> None:
        Guard.not_none(self.claim, "claim")
        Guard.not_none(self.item, "item")

    def matches(self, claims: Iterable[ClaimLike]) -> bool:
        """Return ``True`` if any of *claims* is triple-equal to the bound claim."""
        return any(claims_equal(self.claim, c) for c in claims)

    def operations(self) -> frozenset[Operation]:
        return flatten(self.item)


class AuthorizationContext:
    """Resolved, read-only set of operations one identity may perform.

    The snapshot never changes after construction, so a context can be
    shared and queried from any number of threads.
    """

    __slots__ = ("_operations",)

    def __init__(self, allowed_operations: Iterable[Operation]) -> None:
        Guard.not_none(allowed_operations, "allowed_operations")
        self._operations: frozenset[Operation] = frozenset(allowed_operations)

    @property
    def operations(self) -> frozenset[Operation]:
        return self._operations

    def can_perform(self, operation: Operation) -> bool:
        return operation in self._operations

    def demand(self, operation: Operation) -> None:
        """Raise :class:`ForbiddenError` unless *operation* is permitted."""
        if not self.can_perform(operation):
            raise ForbiddenError(
                f"operation {operation.name!r} is not permitted",
                permission=operation.name,
            )

    def __contains__(self, operation: object) -> bool:
        return operation in self._operations

    def __iter__(self) -> Iterator[Operation]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def __repr__(self) -> str:
        names = sorted(op.name for op in self._operations)
        return f"AuthorizationContext(operations={names!r})"


__all__ = ["Authorization", "AuthorizationContext"]
