"""Config settings – Settings base class and env-key naming."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Each field maps to ``<PREFIX>_<FIELD>`` in the environment, e.g.
    ``RbacSettings.trace_resolution`` ↔ ``RBAC_TRACE_RESOLUTION``.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def env_keys(cls) -> dict[str, str]:
        """Map of field name to environment variable name."""
        return {f.name: cls.env_key(f.name) for f in dataclasses.fields(cls)}


__all__ = ["Settings"]
