"""Config settings – RbacSettings."""
from __future__ import annotations

import dataclasses
import logging

from claims_rbac.config.settings.base import Settings
from claims_rbac.config.validation import InvalidSettingValueError

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class RbacSettings(Settings):
    """Runtime knobs for the resolution engine.

    Environment variables (via :class:`EnvSettingsLoader`)::

        RBAC_LOG_LEVEL=DEBUG
        RBAC_JSON_LOGS=false
        RBAC_TRACE_RESOLUTION=true
    """

    _prefix = "RBAC"

    log_level: str = "INFO"
    json_logs: bool = True
    # emit one debug event per matched binding during resolve()
    trace_resolution: bool = False

    def _validate(self) -> None:
        if not isinstance(self.log_level, str):
            raise InvalidSettingValueError("log_level", self.log_level, "expected a string")
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["RbacSettings"]
