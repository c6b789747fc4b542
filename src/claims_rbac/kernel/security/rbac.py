"""Kernel security – claim-based Role-Based Access Control (RBAC).

Configuration and resolution are two separate phases:

* :class:`Rbac` – mutable builder.  Register roles and allow/deny
  :class:`~claims_rbac.kernel.security.authorization.Authorization`
  bindings, chaining calls.
* :class:`RbacPolicy` – immutable snapshot produced by :meth:`Rbac.freeze`.
  It resolves an identity's claims into an
  :class:`~claims_rbac.kernel.security.authorization.AuthorizationContext`.

Resolution rule (deny overrides allow)::

    permitted = ⋃ flatten(allow items matched) − ⋃ flatten(deny items matched)

Example::

    policy = (
        Rbac()
        .add(editor, viewer)
        .allow(Authorization(Claim(ClaimTypes.GROUP_SID, "editors"), editor))
        .deny(Authorization(Claim(ClaimTypes.ACTOR, "intern"), publish))
        .freeze()
    )
    ctx = policy.resolve(identity)
    if ctx.can_perform(publish):
        ...
"""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable

from claims_rbac.config.settings.rbac import RbacSettings
from claims_rbac.kernel.guards import Guard
from claims_rbac.kernel.security.authorization import Authorization, AuthorizationContext
from claims_rbac.kernel.security.claims import ClaimLike
from claims_rbac.kernel.security.items import Operation, Role
from claims_rbac.observability.logging import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Matching helper
# ---------------------------------------------------------------------------


def matched_operations(
    bindings: Iterable[Authorization],
    claims: Iterable[ClaimLike],
) -> frozenset[Operation]:
    """Union of the operations of every binding whose claim is held.

    A binding matches when its claim is triple-equal to any of *claims*.
    """
    held = tuple(claims)
    operations: set[Operation] = set()
    for binding in bindings:
        if binding.matches(held):
            operations.update(binding.operations())
    return frozenset(operations)


# ---------------------------------------------------------------------------
# RbacPolicy
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class RbacPolicy:
    """Frozen policy: registered roles plus allow and deny bindings.

    Safe to share across threads and tasks; :meth:`resolve` never mutates it.
    """

    roles: frozenset[Role] = frozenset()
    allow_bindings: tuple[Authorization, ...] = ()
    deny_bindings: tuple[Authorization, ...] = ()
    settings: RbacSettings = dataclasses.field(default_factory=RbacSettings, compare=False)

    def resolve(self, identity: Any) -> AuthorizationContext:
        """Resolve *identity* (anything with a ``claims`` iterable)."""
        Guard.not_none(identity, "identity")
        claims = tuple(identity.claims)

        if self.settings.trace_resolution:
            self._trace(claims)

        allowed = matched_operations(self.allow_bindings, claims)
        denied = matched_operations(self.deny_bindings, claims)
        context = AuthorizationContext(allowed - denied)

        logger.debug(
            "rbac.resolved",
            claims=len(claims),
            allowed=len(allowed),
            denied=len(allowed & denied),
            permitted=len(context),
        )
        return context

    def _trace(self, claims: tuple[ClaimLike, ...]) -> None:
        for effect, bindings in (("allow", self.allow_bindings), ("deny", self.deny_bindings)):
            for binding in bindings:
                if binding.matches(claims):
                    logger.debug(
                        "rbac.binding_matched",
                        effect=effect,
                        claim_type=binding.claim.type,
                        item=binding.item.name,
                        item_kind=type(binding.item).__name__,
                    )


# ---------------------------------------------------------------------------
# Rbac builder
# ---------------------------------------------------------------------------


class Rbac:
    """Accumulates roles and bindings; every call returns ``self``.

    Do not mutate a builder while another thread is freezing or resolving
    through it.  Hand a :class:`RbacPolicy` from :meth:`freeze` to
    concurrent readers instead.
    """

    def __init__(self, settings: RbacSettings | None = None) -> None:
        self._settings = settings or RbacSettings()
        self._roles: dict[str, Role] = {}
        self._allow: list[Authorization] = []
        self._deny: list[Authorization] = []

    @property
    def roles(self) -> frozenset[Role]:
        return frozenset(self._roles.values())

    @property
    def allow_bindings(self) -> tuple[Authorization, ...]:
        return tuple(self._allow)

    @property
    def deny_bindings(self) -> tuple[Authorization, ...]:
        return tuple(self._deny)

    def add(self, *roles: Role) -> Rbac:
        """Register *roles*; a role already present by name is kept as is."""
        checked = [Guard.not_none(role, "role") for role in roles]
        for role in checked:
            self._roles.setdefault(role.name, role)
        logger.debug("rbac.roles_added", count=len(roles), total=len(self._roles))
        return self

    def allow(self, *bindings: Authorization) -> Rbac:
        self._allow.extend([Guard.not_none(b, "authorization") for b in bindings])
        logger.debug("rbac.bindings_added", effect="allow", count=len(bindings))
        return self

    def deny(self, *bindings: Authorization) -> Rbac:
        self._deny.extend([Guard.not_none(b, "authorization") for b in bindings])
        logger.debug("rbac.bindings_added", effect="deny", count=len(bindings))
        return self

    def freeze(self) -> RbacPolicy:
        """Snapshot the current state into an immutable :class:`RbacPolicy`."""
        policy = RbacPolicy(
            roles=self.roles,
            allow_bindings=self.allow_bindings,
            deny_bindings=self.deny_bindings,
            settings=self._settings,
        )
        logger.debug(
            "rbac.policy_frozen",
            roles=len(policy.roles),
            allow=len(policy.allow_bindings),
            deny=len(policy.deny_bindings),
        )
        return policy

    def resolve(self, identity: Any) -> AuthorizationContext:
        """Shorthand for ``self.freeze().resolve(identity)``."""
        Guard.not_none(identity, "identity")
        return self.freeze().resolve(identity)


__all__ = ["Rbac", "RbacPolicy", "matched_operations"]
