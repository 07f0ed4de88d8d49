"""Translate failed requests into either a raised error or a fallback value."""

import logging
from typing import NoReturn, TypeVar

from spoticlient.domain.exceptions import (
    SpoticlientException,
    TransportError,
    UnexpectedError,
)
from spoticlient.infrastructure.observability.error_formatting import (
    format_transport_error,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorTranslator:
    """Decides what happens to an error caught by a resource client.

    With ``throw_errors=True`` the error is re-raised as UnexpectedError (the
    original is chained as ``__cause__``). Otherwise the caller-supplied fallback
    is returned and the failure only shows up in the logs.
    """

    def __init__(self, throw_errors: bool = False) -> None:
        self.throw_errors = throw_errors

    def handle(self, error: SpoticlientException, fallback: T, operation: str | None = None) -> T:
        """Raise UnexpectedError or return ``fallback``.

        Args:
            error: The caught error
            fallback: Value to return when errors are suppressed
            operation: What was being attempted, for the log message

        Returns:
            ``fallback`` when errors are suppressed

        Raises:
            UnexpectedError: When ``throw_errors`` is enabled
        """
        if self.throw_errors:
            self.raise_unexpected(error, operation)

        logger.warning("%s (returning %r)", self.describe(error, operation), fallback)
        return fallback

    def raise_unexpected(
        self, error: SpoticlientException, operation: str | None = None
    ) -> NoReturn:
        """Log and raise ``error`` as UnexpectedError regardless of configuration."""
        logger.error(self.describe(error, operation))
        raise UnexpectedError(error) from error

    @staticmethod
    def describe(error: SpoticlientException, operation: str | None = None) -> str:
        if isinstance(error, TransportError):
            return format_transport_error(error, operation)
        prefix = f"Failed to {operation}" if operation else "Spotify request failed"
        return f"{prefix}: {error.message}"
