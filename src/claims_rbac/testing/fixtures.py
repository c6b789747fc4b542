"""Testing fixtures – reference policy and current authorization context.

Register in a ``conftest.py``::

    pytest_plugins = ["claims_rbac.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from claims_rbac.kernel.security import AuthorizationContext, CurrentAuthorization, RbacPolicy
from claims_rbac.testing.scenario import reference_rbac


@pytest.fixture
def reference_policy() -> RbacPolicy:
    """Frozen policy built from the reference scenario."""
    return reference_rbac().freeze()


@pytest.fixture
def empty_authorization():
    """Set an empty :class:`AuthorizationContext` as current for the test.

    Yields the context; tests may swap it with
    ``CurrentAuthorization.set_current(...)``.
    """
    context = AuthorizationContext(())
    token = CurrentAuthorization.set_current(context)
    yield context
    CurrentAuthorization.reset(token)


__all__ = ["empty_authorization", "reference_policy"]
