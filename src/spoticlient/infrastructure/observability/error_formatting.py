"""Human-readable messages for failed Spotify requests.

Turns a bare "403" into something a user can act on.
"""

from spoticlient.domain.exceptions import TransportError

# Hey future me - maps HTTP status codes to (description, hint). The hints say WHAT TO DO.
# Add more as users report confusing errors.
STATUS_MESSAGES: dict[int, tuple[str, str]] = {
    400: (
        "Bad request",
        "Check the ids and option values passed to the call.",
    ),
    401: (
        "Unauthorized",
        "The access token is invalid or expired. Refresh it and create a new Client.",
    ),
    403: (
        "Forbidden",
        "The token lacks the scope for this endpoint (e.g. user-follow-modify, "
        "user-library-read) or the account is not allowed to use it.",
    ),
    404: (
        "Not found",
        "The id does not exist or is not available in the requested market.",
    ),
    429: (
        "Too many requests",
        "Spotify rate limited this token. Wait for the Retry-After period before retrying.",
    ),
}

SERVER_ERROR = (
    "Spotify service error",
    "Spotify is having trouble. Try again later.",
)

NETWORK_ERROR = (
    "Network failure",
    "Spotify could not be reached. Check connectivity, DNS and the configured timeout.",
)


def describe_status(status_code: int | None) -> tuple[str, str]:
    """Return ``(description, hint)`` for an HTTP status code (None = network failure)."""
    if status_code is None:
        return NETWORK_ERROR
    if status_code in STATUS_MESSAGES:
        return STATUS_MESSAGES[status_code]
    if status_code >= 500:
        return SERVER_ERROR
    return ("Request failed", "Check the request parameters and token scopes.")


def format_transport_error(e: TransportError, operation: str | None = None) -> str:
    """Format a TransportError with a human-readable explanation and hint.

    Example WITHOUT this function:
        WARNING │ Spotify PUT /me/following returned 403: Insufficient client scope

    Example WITH this function:
        WARNING │ Failed to follow artists: Forbidden (HTTP 403) - Insufficient client scope
        HINT: The token lacks the scope for this endpoint ...

    Args:
        e: The TransportError
        operation: What was being attempted (e.g. "follow artists")

    Returns:
        Formatted message with status, description and hint
    """
    description, hint = describe_status(e.status_code)

    target = f"Failed to {operation}" if operation else "Spotify request failed"
    status = f"HTTP {e.status_code}" if e.status_code is not None else "no response"
    message = f"{target}: {description} ({status})"

    if e.detail:
        message += f" - {e.detail}"

    return f"{message}\nHINT: {hint}"
