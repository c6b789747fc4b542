"""Kernel security – Claim, ClaimsIdentity and claim triple-equality.

A claim is matched against policy bindings by its
``(type, value_type, value)`` triple.  The helpers here are duck-typed:
any object exposing those three attributes participates, so claims
materialised by an external identity framework match the ones a policy
was configured with.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Iterator, Protocol

from claims_rbac.kernel.guards import Guard


class ClaimTypes:
    """Well-known claim type URIs."""

    ACTOR = "http://schemas.xmlsoap.org/ws/2009/09/identity/claims/actor"
    GROUP_SID = "http://schemas.microsoft.com/ws/2008/06/identity/claims/groupsid"
    NAME = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/name"
    NAME_IDENTIFIER = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/nameidentifier"
    ROLE = "http://schemas.microsoft.com/ws/2008/06/identity/claims/role"
    EMAIL = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/emailaddress"


class ClaimValueTypes:
    """Well-known claim value type URIs."""

    STRING = "http://www.w3.org/2001/XMLSchema#string"
    INTEGER = "http://www.w3.org/2001/XMLSchema#integer"
    BOOLEAN = "http://www.w3.org/2001/XMLSchema#boolean"


DEFAULT_ISSUER = "LOCAL AUTHORITY"


class ClaimLike(Protocol):
    """Anything carrying the claim triple."""

    @property
    def type(self) -> str: ...

    @property
    def value_type(self) -> str: ...

    @property
    def value(self) -> str: ...


@dataclasses.dataclass(frozen=True)
class Claim:
    """An identity attribute.

    Equality and hashing cover the ``(type, value_type, value)`` triple only;
    ``issuer`` is informational.

    Example::

        group = Claim(ClaimTypes.GROUP_SID, "admins")
    """

    type: str
    value: str
    value_type: str = ClaimValueTypes.STRING
    issuer: str = dataclasses.field(default=DEFAULT_ISSUER, compare=False)

    def __post_init__(self) -> None:
        Guard.not_none(self.type, "type")
        Guard.not_none(self.value, "value")
        Guard.not_none(self.value_type, "value_type")

    def __str__(self) -> str:
        return f"{self.type}: {self.value}"


def claim_key(claim: ClaimLike | None) -> tuple[Any, Any, Any] | None:
    """Return the ``(type, value_type, value)`` triple, or ``None``."""
    if claim is None:
        return None
    return (claim.type, claim.value_type, claim.value)


def claims_equal(x: ClaimLike | None, y: ClaimLike | None) -> bool:
    """Triple-equality.  ``None`` equals only ``None``."""
    if x is None or y is None:
        return x is None and y is None
    return claim_key(x) == claim_key(y)


def claim_hash(claim: ClaimLike | None) -> int:
    """Hash consistent with :func:`claims_equal` (``0`` for ``None``)."""
    if claim is None:
        return 0
    return hash(claim_key(claim))


class ClaimComparer:
    """Equality/hash pair over the claim triple, for reuse by callers.

    Example::

        comparer = ClaimComparer()
        comparer.equals(token_claim, Claim(ClaimTypes.ROLE, "admin"))
        distinct = comparer.unique(identity.claims)
    """

    def equals(self, x: ClaimLike | None, y: ClaimLike | None) -> bool:
        return claims_equal(x, y)

    def hash(self, claim: ClaimLike | None) -> int:
        return claim_hash(claim)

    def key(self, claim: ClaimLike | None) -> tuple[Any, Any, Any] | None:
        return claim_key(claim)

    def contains(self, claims: Iterable[ClaimLike | None], claim: ClaimLike | None) -> bool:
        """Return ``True`` if any element of *claims* is triple-equal to *claim*."""
        return any(claims_equal(c, claim) for c in claims)

    def unique(self, claims: Iterable[ClaimLike | None]) -> list[ClaimLike | None]:
        """Drop triple-duplicates from *claims*, keeping first-seen order."""
        seen: set[tuple[Any, Any, Any] | None] = set()
        result: list[ClaimLike | None] = []
        for claim in claims:
            key = claim_key(claim)
            if key in seen:
                continue
            seen.add(key)
            result.append(claim)
        return result


@dataclasses.dataclass(frozen=True)
class ClaimsIdentity:
    """In-process identity: an ordered collection of claims.

    Resolution only needs a ``claims`` iterable, so any object shaped like
    this one is accepted in its place.
    """

    claims: tuple[ClaimLike, ...] = ()
    authentication_type: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "claims", tuple(Guard.not_none(self.claims, "claims")))

    @property
    def is_authenticated(self) -> bool:
        return bool(self.authentication_type)

    def has_claim(self, claim: ClaimLike) -> bool:
        return any(claims_equal(c, claim) for c in self.claims)

    def find_all(self, claim_type: str) -> list[ClaimLike]:
        return [c for c in self.claims if c.type == claim_type]

    def __iter__(self) -> Iterator[ClaimLike]:
        return iter(self.claims)


__all__ = [
    "Claim",
    "ClaimComparer",
    "ClaimLike",
    "ClaimTypes",
    "ClaimValueTypes",
    "ClaimsIdentity",
    "DEFAULT_ISSUER",
    "claim_hash",
    "claim_key",
    "claims_equal",
]
