"""Tests for human-readable transport error messages."""

import pytest

from spoticlient.domain.exceptions import TransportError
from spoticlient.infrastructure.observability.error_formatting import (
    NETWORK_ERROR,
    SERVER_ERROR,
    describe_status,
    format_transport_error,
)


class TestDescribeStatus:
    """Test status code lookup."""

    @pytest.mark.parametrize(
        ("status_code", "expected"),
        [(401, "Unauthorized"), (403, "Forbidden"), (404, "Not found"), (429, "Too many requests")],
    )
    def test_known_status(self, status_code: int, expected: str) -> None:
        assert describe_status(status_code)[0] == expected

    def test_server_error(self) -> None:
        assert describe_status(503) == SERVER_ERROR

    def test_network_error(self) -> None:
        assert describe_status(None) == NETWORK_ERROR

    def test_unknown_client_error(self) -> None:
        assert describe_status(418)[0] == "Request failed"


class TestFormatTransportError:
    """Test format_transport_error."""

    def test_includes_operation_status_detail_and_hint(self) -> None:
        error = TransportError(
            "Spotify PUT /me/following returned 403: Insufficient client scope",
            status_code=403,
            url="https://api.spotify.com/v1/me/following",
            detail="Insufficient client scope",
        )

        message = format_transport_error(error, "follow artists")

        assert message.startswith(
            "Failed to follow artists: Forbidden (HTTP 403) - Insufficient client scope"
        )
        assert "\nHINT: " in message
        assert "scope" in message.split("HINT: ")[1]

    def test_network_failure(self) -> None:
        error = TransportError("Spotify GET /me failed: timed out", detail="timed out")

        message = format_transport_error(error)

        assert message.startswith("Spotify request failed: Network failure (no response)")
