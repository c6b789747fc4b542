"""Testing helpers – reference scenario and pytest fixtures.

``claims_rbac.testing.fixtures`` imports pytest; install the ``test`` extra.
"""
from claims_rbac.testing.scenario import (
    EXPECTED_OPERATIONS,
    ActorClaims,
    MembershipClaims,
    Operations,
    Roles,
    Tasks,
    Users,
    allow_authorizations,
    deny_authorizations,
    reference_rbac,
)

__all__ = [
    "EXPECTED_OPERATIONS",
    "ActorClaims",
    "MembershipClaims",
    "Operations",
    "Roles",
    "Tasks",
    "Users",
    "allow_authorizations",
    "deny_authorizations",
    "reference_rbac",
]
