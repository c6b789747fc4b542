"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def drop_claim_values(
    logger: Any,           # noqa: ARG001
    method_name: str,      # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor that strips raw claim values from log events.

    Only claim *types* may reach the log stream; a ``claim_value`` key
    added by mistake is replaced with ``[REDACTED]``.
    """
    if "claim_value" in event_dict:
        event_dict["claim_value"] = "[REDACTED]"
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["drop_claim_values", "get_logger"]
