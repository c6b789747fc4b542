"""Observability – structured logging helpers."""
from claims_rbac.observability.logging.factory import JsonLoggerFactory, configure_logging
from claims_rbac.observability.logging.processors import drop_claim_values, get_logger

__all__ = [
    "JsonLoggerFactory",
    "configure_logging",
    "drop_claim_values",
    "get_logger",
]
