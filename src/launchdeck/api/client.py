"""Async HTTP client for the deployment dashboard API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from launchdeck.api.exceptions import (
    DashboardAPIError,
    DashboardAuthenticationError,
    DashboardNotFoundError,
    DashboardPermissionError,
    DashboardRateLimitError,
    DashboardValidationError,
)
from launchdeck.config import DEFAULT_API_URL

logger = logging.getLogger(__name__)


class DashboardClient:
    """Async API client for the deployment dashboard.

    One ``httpx.AsyncClient`` per instance, created on the first request
    and recreated if it was closed. Every request carries the bearer token.
    """

    def __init__(self, token: str, base_url: str = DEFAULT_API_URL) -> None:
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._client: httpx.AsyncClient | None = None

    @property
    def token(self) -> str:
        return self._token

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                },
                timeout=httpx.Timeout(30.0, connect=10.0),
            )
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        client = self._get_client()
        logger.debug("%s %s", method, path)
        response = await client.request(method, path, json=json, params=params)
        self._handle_errors(response)
        if response.status_code == 204:
            return {}
        if not response.content:
            return {}
        return response.json()

    def _handle_errors(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        logger.debug("request failed with %s", response.status_code)
        if response.status_code == 401:
            raise DashboardAuthenticationError("Invalid API token")
        if response.status_code == 403:
            raise DashboardPermissionError(f"Permission denied: {response.url}")
        if response.status_code == 404:
            raise DashboardNotFoundError(f"Resource not found: {response.url}")
        if response.status_code == 422:
            try:
                details = response.json()
            except ValueError:
                details = {"error": response.text}
            raise DashboardValidationError(details)
        if response.status_code == 429:
            raise DashboardRateLimitError("Rate limit exceeded")
        try:
            error_body = response.json()
            msg = error_body.get("message", response.text)
        except (ValueError, AttributeError):
            msg = response.text
        raise DashboardAPIError(f"API error {response.status_code}: {msg}")

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self._request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self._request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Any:
        return await self._request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self._request("DELETE", path, **kwargs)

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
