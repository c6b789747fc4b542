"""Unit tests for the Operation / Task / Role hierarchy."""

from __future__ import annotations

import pytest

from claims_rbac.kernel.errors import InvalidArgumentError
from claims_rbac.kernel.security import Operation, Role, Task, flatten
from claims_rbac.testing import Operations, Roles, Tasks


# ---------------------------------------------------------------------------
# Operation
# ---------------------------------------------------------------------------


class TestOperation:
    def test_flatten_is_singleton(self) -> None:
        op = Operation("orders:read")
        assert op.flatten() == frozenset({op})

    def test_equality_is_by_name(self) -> None:
        assert Operation("a") == Operation("a")
        assert Operation("a") is not Operation("a")
        assert hash(Operation("a")) == hash(Operation("a"))

    def test_different_names_differ(self) -> None:
        assert Operation("a") != Operation("b")

    def test_str_is_name(self) -> None:
        assert str(Operation("orders:read")) == "orders:read"

    def test_frozen(self) -> None:
        op = Operation("a")
        with pytest.raises((AttributeError, TypeError)):
            op.name = "b"  # type: ignore[misc]

    def test_none_name_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            Operation(None)  # type: ignore[arg-type]
        assert exc_info.value.argument == "name"

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            Operation("   ")
        assert exc_info.value.argument == "name"


# ---------------------------------------------------------------------------
# Task
# ---------------------------------------------------------------------------


class TestTask:
    def test_flatten_returns_operations(self) -> None:
        assert Tasks.TASK2.flatten() == frozenset({
            Operations.OPERATION4,
            Operations.OPERATION5,
            Operations.OPERATION6,
        })

    def test_operations_frozen_from_iterable(self) -> None:
        task = Task("t", [Operation("a"), Operation("a"), Operation("b")])
        assert isinstance(task.operations, frozenset)
        assert task.operations == frozenset({Operation("a"), Operation("b")})

    def test_empty_task(self) -> None:
        assert Task("t").flatten() == frozenset()

    def test_equality_ignores_operations(self) -> None:
        assert Task("t", {Operation("a")}) == Task("t", {Operation("b")})
        assert hash(Task("t", {Operation("a")})) == hash(Task("t"))

    def test_not_equal_to_operation_of_same_name(self) -> None:
        assert Task("x") != Operation("x")

    def test_none_name_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            Task(None)  # type: ignore[arg-type]
        assert exc_info.value.argument == "name"

    def test_none_operations_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            Task("t", None)  # type: ignore[arg-type]
        assert exc_info.value.argument == "operations"


# ---------------------------------------------------------------------------
# Role
# ---------------------------------------------------------------------------


class TestRole:
    def test_tasks_only(self) -> None:
        assert Roles.ROLE1.flatten() == Tasks.TASK2.operations

    def test_inherited_role_contributes_its_tasks(self) -> None:
        assert Roles.ROLE2.flatten() == Tasks.TASK1.operations | Tasks.TASK2.operations

    def test_tasks_and_direct_operations(self) -> None:
        assert Roles.ROLE3.flatten() == frozenset({
            Operations.OPERATION2,
            Operations.OPERATION4,
            Operations.OPERATION7,
        })

    def test_inherited_role_direct_operations_not_included(self) -> None:
        base = Role("base", operations={Operation("direct")}, tasks={Task("t", {Operation("via-task")})})
        child = Role("child", roles={base})
        assert child.flatten() == frozenset({Operation("via-task")})

    def test_delegation_is_one_level_deep(self) -> None:
        grandparent = Role("gp", tasks={Task("deep", {Operation("deep-op")})})
        parent = Role("parent", roles={grandparent})
        child = Role("child", roles={parent})
        assert child.flatten() == frozenset()
        assert parent.flatten() == frozenset({Operation("deep-op")})

    def test_duplicates_across_sources_collapse(self) -> None:
        shared = Operation("shared")
        role = Role(
            "r",
            operations={Operation("shared")},
            tasks={Task("t1", {shared}), Task("t2", {Operation("shared")})},
        )
        assert role.flatten() == frozenset({shared})

    def test_reachable_tasks(self) -> None:
        assert Roles.ROLE2.reachable_tasks() == frozenset({Tasks.TASK1, Tasks.TASK2})

    def test_flatten_is_repeatable(self) -> None:
        assert Roles.ROLE2.flatten() == Roles.ROLE2.flatten()

    def test_equality_is_by_name(self) -> None:
        assert Role("admin", tasks={Tasks.TASK1}) == Role("admin")
        assert len({Role("admin"), Role("admin", operations={Operation("x")})}) == 1

    def test_none_name_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            Role(None)  # type: ignore[arg-type]
        assert exc_info.value.argument == "name"


# ---------------------------------------------------------------------------
# flatten()
# ---------------------------------------------------------------------------


class TestFlattenFunction:
    @pytest.mark.parametrize(
        "item",
        [Operations.OPERATION1, Tasks.TASK3, Roles.ROLE2],
        ids=["operation", "task", "role"],
    )
    def test_matches_method(self, item) -> None:
        assert flatten(item) == item.flatten()

    def test_rejects_foreign_object(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            flatten("Operation1")  # type: ignore[arg-type]
        assert exc_info.value.argument == "item"
