"""Tests for the dashboard API client."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from launchdeck.api.client import DashboardClient
from launchdeck.api.exceptions import (
    DashboardAPIError,
    DashboardAuthenticationError,
    DashboardNotFoundError,
    DashboardPermissionError,
    DashboardRateLimitError,
    DashboardValidationError,
)
from launchdeck.config import DEFAULT_API_URL


@pytest.fixture
def client():
    return DashboardClient("test-token")


def _mock_http(response):
    mock_http = AsyncMock()
    mock_http.request.return_value = response
    mock_http.is_closed = False
    return mock_http


class TestClientInit:
    def test_stores_token(self, client):
        assert client.token == "test-token"

    def test_default_base_url(self, client):
        assert client.base_url == DEFAULT_API_URL

    def test_strips_trailing_slash(self):
        assert DashboardClient("t", "https://api.example.com/v1/").base_url == "https://api.example.com/v1"

    def test_lazy_client_starts_none(self, client):
        assert client._client is None

    def test_get_client_creates_client(self, client):
        http_client = client._get_client()
        assert isinstance(http_client, httpx.AsyncClient)
        assert str(http_client.base_url).rstrip("/") == DEFAULT_API_URL
        assert http_client.headers["Authorization"] == "Bearer test-token"

    def test_get_client_reuses_client(self, client):
        assert client._get_client() is client._get_client()


class TestErrorHandling:
    def _make_response(self, status_code, json_data=None, text=""):
        response = MagicMock(spec=httpx.Response)
        response.status_code = status_code
        response.is_success = 200 <= status_code < 300
        response.text = text
        response.url = "http://localhost:3000/projects/1"
        if json_data is not None:
            response.json.return_value = json_data
        else:
            response.json.side_effect = ValueError("no json")
        return response

    def test_success_no_error(self, client):
        client._handle_errors(self._make_response(200))

    def test_401_raises_auth_error(self, client):
        with pytest.raises(DashboardAuthenticationError, match="Invalid API token"):
            client._handle_errors(self._make_response(401))

    def test_403_raises_permission_error(self, client):
        with pytest.raises(DashboardPermissionError, match="Permission denied"):
            client._handle_errors(self._make_response(403))

    def test_404_raises_not_found(self, client):
        with pytest.raises(DashboardNotFoundError, match="Resource not found"):
            client._handle_errors(self._make_response(404))

    def test_422_raises_validation_error(self, client):
        response = self._make_response(422, json_data={"errors": {"name": ["required"]}})
        with pytest.raises(DashboardValidationError) as exc_info:
            client._handle_errors(response)
        assert exc_info.value.details == {"errors": {"name": ["required"]}}

    def test_422_with_no_json(self, client):
        with pytest.raises(DashboardValidationError) as exc_info:
            client._handle_errors(self._make_response(422, text="validation failed"))
        assert exc_info.value.details == {"error": "validation failed"}

    def test_429_raises_rate_limit(self, client):
        with pytest.raises(DashboardRateLimitError, match="Rate limit"):
            client._handle_errors(self._make_response(429))

    def test_500_raises_generic_error(self, client):
        response = self._make_response(500, json_data={"message": "Server error"})
        with pytest.raises(DashboardAPIError, match="500.*Server error"):
            client._handle_errors(response)

    def test_500_with_no_json(self, client):
        with pytest.raises(DashboardAPIError, match="500"):
            client._handle_errors(self._make_response(500, text="Internal Server Error"))


class TestRequest:
    @pytest.mark.asyncio
    async def test_get_returns_json_list(self, client):
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.is_success = True
        mock_response.content = b'[{"id": 1}]'
        mock_response.json.return_value = [{"id": 1}]
        client._client = _mock_http(mock_response)

        result = await client.get("/projects")
        assert result == [{"id": 1}]
        client._client.request.assert_called_once_with("GET", "/projects", json=None, params=None)

    @pytest.mark.asyncio
    async def test_post_sends_json(self, client):
        mock_response = MagicMock()
        mock_response.status_code = 201
        mock_response.is_success = True
        mock_response.content = b'{"id": 3}'
        mock_response.json.return_value = {"id": 3}
        client._client = _mock_http(mock_response)

        await client.post("/projects/1/env", json={"key": "A", "value": "1"})
        client._client.request.assert_called_once_with(
            "POST", "/projects/1/env", json={"key": "A", "value": "1"}, params=None
        )

    @pytest.mark.asyncio
    async def test_204_returns_empty_dict(self, client):
        mock_response = MagicMock()
        mock_response.status_code = 204
        mock_response.is_success = True
        mock_response.content = b""
        client._client = _mock_http(mock_response)

        assert await client.delete("/projects/1") == {}

    @pytest.mark.asyncio
    async def test_empty_content_returns_empty_dict(self, client):
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.is_success = True
        mock_response.content = b""
        client._client = _mock_http(mock_response)

        assert await client.post("/projects/1/deployments/redeploy") == {}


class TestClose:
    @pytest.mark.asyncio
    async def test_close_when_no_client(self, client):
        await client.close()

    @pytest.mark.asyncio
    async def test_close_calls_aclose(self, client):
        mock_http = AsyncMock()
        mock_http.is_closed = False
        client._client = mock_http

        await client.close()
        mock_http.aclose.assert_called_once()

    @pytest.mark.asyncio
    async def test_close_when_already_closed(self, client):
        mock_http = AsyncMock()
        mock_http.is_closed = True
        client._client = mock_http

        await client.close()
        mock_http.aclose.assert_not_called()
