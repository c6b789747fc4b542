"""Kernel security – items, claims, bindings, RBAC resolution and enforcement."""
from claims_rbac.kernel.security.authorization import Authorization, AuthorizationContext
from claims_rbac.kernel.security.claims import (
    Claim,
    ClaimComparer,
    ClaimLike,
    ClaimTypes,
    ClaimValueTypes,
    ClaimsIdentity,
    claim_hash,
    claim_key,
    claims_equal,
)
from claims_rbac.kernel.security.enforcement import CurrentAuthorization, require_operation
from claims_rbac.kernel.security.items import Item, Operation, Role, Task, flatten
from claims_rbac.kernel.security.rbac import Rbac, RbacPolicy, matched_operations

__all__ = [
    "Authorization",
    "AuthorizationContext",
    "Claim",
    "ClaimComparer",
    "ClaimLike",
    "ClaimTypes",
    "ClaimValueTypes",
    "ClaimsIdentity",
    "CurrentAuthorization",
    "Item",
    "Operation",
    "Rbac",
    "RbacPolicy",
    "Role",
    "Task",
    "claim_hash",
    "claim_key",
    "claims_equal",
    "flatten",
    "matched_operations",
    "require_operation",
]
