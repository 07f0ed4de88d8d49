"""Tests for the HTTP util."""

import json
from collections.abc import AsyncIterator

import httpx
import pytest
from pytest_httpx import HTTPXMock

from spoticlient.config.settings import Settings
from spoticlient.domain.exceptions import ConfigurationError, TransportError
from spoticlient.infrastructure.integrations.http_client import HttpUtil

from records import API


@pytest.fixture
async def util(settings: Settings) -> AsyncIterator[HttpUtil]:
    """Create HTTP util for testing."""
    util = HttpUtil("test-token", settings)
    yield util
    await util.close()


class TestHttpUtilInit:
    """Test HTTP util initialization."""

    def test_empty_token_rejected(self, settings: Settings) -> None:
        with pytest.raises(ConfigurationError):
            HttpUtil("  ", settings)

    async def test_client_is_lazy(self, util: HttpUtil) -> None:
        """Test that no httpx client exists before the first request."""
        assert util._client is None
        await util._get_client()
        assert util._client is not None

    async def test_close_releases_client(self, util: HttpUtil) -> None:
        await util._get_client()
        await util.close()
        assert util._client is None


class TestHttpUtilFetch:
    """Test HttpUtil.fetch."""

    @pytest.mark.asyncio
    async def test_get_decodes_json_and_sends_token(
        self, util: HttpUtil, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(url=f"{API}/me", json={"id": "u1"})

        result = await util.fetch("/me")

        assert result == {"id": "u1"}
        request = httpx_mock.get_request()
        assert request.method == "GET"
        assert request.headers["Authorization"] == "Bearer test-token"
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_none_params_are_dropped(self, util: HttpUtil, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{API}/me/top/tracks?limit=5", json={"items": []})

        await util.fetch("/me/top/tracks", params={"limit": 5, "offset": None})

        assert "offset" not in str(httpx_mock.get_request().url)

    @pytest.mark.asyncio
    async def test_put_sends_json_body(self, util: HttpUtil, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{API}/playlists/p1/followers", method="PUT", status_code=200)

        result = await util.fetch(
            "/playlists/p1/followers",
            method="PUT",
            body={"public": False},
            headers={"Content-Type": "application/json"},
        )

        assert result is None
        request = httpx_mock.get_request()
        assert json.loads(request.content) == {"public": False}
        assert request.headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self, util: HttpUtil, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{API}/me/tracks?ids=t1", method="DELETE", status_code=204)

        assert await util.fetch("/me/tracks", method="DELETE", params={"ids": "t1"}) is None

    @pytest.mark.asyncio
    async def test_error_status_raises_transport_error(
        self, util: HttpUtil, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            url=f"{API}/me",
            status_code=401,
            json={"error": {"status": 401, "message": "The access token expired"}},
        )

        with pytest.raises(TransportError) as exc_info:
            await util.fetch("/me")

        error = exc_info.value
        assert error.status_code == 401
        assert error.detail == "The access token expired"
        assert error.url == f"{API}/me"
        assert error.is_network_error is False

    @pytest.mark.asyncio
    async def test_error_without_json_body(self, util: HttpUtil, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{API}/me", status_code=502, text="Bad gateway")

        with pytest.raises(TransportError) as exc_info:
            await util.fetch("/me")

        assert exc_info.value.status_code == 502
        assert exc_info.value.detail == "Bad gateway"

    @pytest.mark.asyncio
    async def test_token_style_error_body(self, util: HttpUtil, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{API}/me",
            status_code=400,
            json={"error": "invalid_client", "error_description": "Invalid client"},
        )

        with pytest.raises(TransportError) as exc_info:
            await util.fetch("/me")

        assert exc_info.value.detail == "Invalid client"

    @pytest.mark.asyncio
    async def test_network_failure(self, util: HttpUtil, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

        with pytest.raises(TransportError) as exc_info:
            await util.fetch("/me")

        assert exc_info.value.is_network_error is True
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_invalid_json(self, util: HttpUtil, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{API}/me", status_code=200, text="<html>")

        with pytest.raises(TransportError) as exc_info:
            await util.fetch("/me")

        assert exc_info.value.status_code == 200
