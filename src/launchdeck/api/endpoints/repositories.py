"""Source repository API endpoints."""

from __future__ import annotations

from launchdeck.api.client import DashboardClient
from launchdeck.api.models import Repository


class RepositoriesAPI:
    def __init__(self, client: DashboardClient) -> None:
        self._client = client

    async def list(self) -> list[Repository]:
        data = await self._client.get("/github/repositories")
        items = data if isinstance(data, list) else data.get("repositories", [])
        return [Repository.model_validate(r) for r in items]
