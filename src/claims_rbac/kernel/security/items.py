"""Kernel security – the permission item hierarchy.

Three closed kinds, leaves first::

    Operation  ⊂  Task  ⊂  Role

Every item is identified by its name within its kind: two ``Operation``
instances named ``"orders:read"`` are the same operation for equality,
hashing and set membership.  Member collections are frozensets and never
take part in equality.
"""

from __future__ import annotations

import dataclasses
from typing import Union

from claims_rbac.kernel.errors.domain import InvalidArgumentError
from claims_rbac.kernel.guards import Guard


def _freeze(obj: object, field: str) -> None:
    """Replace the iterable held in *field* with a frozenset."""
    members = Guard.not_none(getattr(obj, field), field)
    object.__setattr__(obj, field, frozenset(members))


@dataclasses.dataclass(frozen=True)
class Operation:
    """Atomic permission unit."""

    name: str

    def __post_init__(self) -> None:
        Guard.not_blank(self.name, "name")

    def flatten(self) -> frozenset[Operation]:
        return frozenset((self,))

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class Task:
    """Named bundle of operations.

    Example::

        manage_orders = Task("manage-orders", {Operation("orders:read"), Operation("orders:write")})
    """

    name: str
    operations: frozenset[Operation] = dataclasses.field(default=frozenset(), compare=False)

    def __post_init__(self) -> None:
        Guard.not_blank(self.name, "name")
        _freeze(self, "operations")

    def flatten(self) -> frozenset[Operation]:
        return self.operations

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class Role:
    """Named bundle of operations, tasks and other roles.

    Role delegation is one level deep: a referenced role contributes the
    operations of its *direct tasks* only.  Its own direct operations and
    the roles it references in turn are not pulled in.

    Example::

        reviewer = Role("reviewer", tasks={read_docs})
        editor = Role("editor", tasks={edit_docs}, roles={reviewer})
    """

    name: str
    operations: frozenset[Operation] = dataclasses.field(default=frozenset(), compare=False)
    tasks: frozenset[Task] = dataclasses.field(default=frozenset(), compare=False)
    roles: frozenset[Role] = dataclasses.field(default=frozenset(), compare=False)

    def __post_init__(self) -> None:
        Guard.not_blank(self.name, "name")
        for field in ("operations", "tasks", "roles"):
            _freeze(self, field)

    def reachable_tasks(self) -> frozenset[Task]:
        """Own tasks plus the direct tasks of every referenced role."""
        inherited = (task for role in self.roles for task in role.tasks)
        return self.tasks.union(inherited)

    def flatten(self) -> frozenset[Operation]:
        from_tasks = (op for task in self.reachable_tasks() for op in task.operations)
        return self.operations.union(from_tasks)

    def __str__(self) -> str:
        return self.name


Item = Union[Operation, Task, Role]


def flatten(item: Item) -> frozenset[Operation]:
    """Return every operation reachable from *item*."""
    if isinstance(item, (Operation, Task, Role)):
        return item.flatten()
    raise InvalidArgumentError(
        "item", f"Expected Operation, Task or Role, got {type(item).__name__}"
    )


__all__ = ["Item", "Operation", "Role", "Task", "flatten"]
