"""Domain exceptions."""

from typing import Any


class SpoticlientException(Exception):
    """Base exception for all spoticlient exceptions."""

    # Hey future me, message is stored as an attribute so handlers can read it without parsing
    # str(exception). Don't raise this base class directly - use a specific subclass!
    def __init__(self, message: str, *args: Any) -> None:
        super().__init__(message, *args)
        self.message = message


class TransportError(SpoticlientException):
    """A request to the Spotify Web API failed.

    Raised by the HTTP util for non-2xx responses (``status_code`` set) and for
    network level failures such as DNS errors or timeouts (``status_code`` is None).
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.detail = detail

    @property
    def is_network_error(self) -> bool:
        """True when the request never produced an HTTP response."""
        return self.status_code is None


class RecordDecodeError(SpoticlientException):
    """A response body did not have the shape of the expected Spotify object."""

    def __init__(self, record_type: str, detail: str) -> None:
        super().__init__(f"Could not decode {record_type} record: {detail}")
        self.record_type = record_type
        self.detail = detail


class UnexpectedError(SpoticlientException):
    """Raised to callers when a client is configured with ``throw_errors=True``.

    Wraps the original failure, which is available as ``cause`` and is also
    chained as ``__cause__``.
    """

    def __init__(self, cause: BaseException) -> None:
        message = getattr(cause, "message", None) or str(cause) or type(cause).__name__
        super().__init__(message)
        self.cause = cause


class ConfigurationError(SpoticlientException):
    """Client misconfiguration.

    Example:
        raise ConfigurationError("Spotify token must not be empty")
    """

    pass


class ClientReleasedError(SpoticlientException):
    """An entity tried to reach its owning Client after the Client was garbage collected."""

    def __init__(self, entity_type: str, entity_id: str | None) -> None:
        super().__init__(
            f"{entity_type} {entity_id} outlived its Client; keep a reference to the Client "
            "while using entities it returned"
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


# Errors the resource clients route through the ErrorTranslator instead of letting them escape.
RECOVERABLE_ERRORS: tuple[type[SpoticlientException], ...] = (
    TransportError,
    RecordDecodeError,
)

__all__ = [
    "RECOVERABLE_ERRORS",
    "ClientReleasedError",
    "ConfigurationError",
    "RecordDecodeError",
    "SpoticlientException",
    "TransportError",
    "UnexpectedError",
]
