"""Tests for the error translator."""

import logging

import pytest

from spoticlient.domain.exceptions import (
    RecordDecodeError,
    TransportError,
    UnexpectedError,
)
from spoticlient.infrastructure.error_handling import ErrorTranslator


@pytest.fixture
def transport_error() -> TransportError:
    return TransportError(
        "Spotify GET /me returned 401: The access token expired",
        status_code=401,
        detail="The access token expired",
    )


class TestSuppressingTranslator:
    """Test the default (suppressing) behaviour."""

    def test_returns_fallback(self, transport_error: TransportError) -> None:
        translator = ErrorTranslator()
        sentinel: list[bool] = []

        assert translator.handle(transport_error, sentinel, "check saved tracks") is sentinel

    def test_logs_warning_with_hint(
        self, transport_error: TransportError, caplog: pytest.LogCaptureFixture
    ) -> None:
        translator = ErrorTranslator(throw_errors=False)

        with caplog.at_level(logging.WARNING, logger="spoticlient.infrastructure.error_handling"):
            translator.handle(transport_error, False, "fetch current user")

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert "Failed to fetch current user: Unauthorized (HTTP 401)" in record.getMessage()
        assert "HINT:" in record.getMessage()


class TestThrowingTranslator:
    """Test throw_errors=True."""

    def test_raises_unexpected_error_with_cause(self, transport_error: TransportError) -> None:
        translator = ErrorTranslator(throw_errors=True)

        with pytest.raises(UnexpectedError) as exc_info:
            translator.handle(transport_error, None)

        assert exc_info.value.cause is transport_error
        assert exc_info.value.__cause__ is transport_error
        assert exc_info.value.message == transport_error.message

    def test_raise_unexpected_ignores_configuration(self, transport_error: TransportError) -> None:
        translator = ErrorTranslator(throw_errors=False)

        with pytest.raises(UnexpectedError):
            translator.raise_unexpected(transport_error, "fetch current user")

    def test_decode_errors_are_described(self) -> None:
        error = RecordDecodeError("artist", "field required")

        assert ErrorTranslator.describe(error, "get artist a1") == (
            "Failed to get artist a1: Could not decode artist record: field required"
        )
