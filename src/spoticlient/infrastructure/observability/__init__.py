"""Observability infrastructure for structured logging."""

from spoticlient.infrastructure.observability.error_formatting import (
    describe_status,
    format_transport_error,
)
from spoticlient.infrastructure.observability.logging import (
    configure_logging,
    configure_logging_from_settings,
    get_correlation_id,
    set_correlation_id,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "describe_status",
    "format_transport_error",
    "get_correlation_id",
    "set_correlation_id",
]
