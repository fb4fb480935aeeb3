"""Deployment API endpoints."""

from __future__ import annotations

from launchdeck.api.client import DashboardClient
from launchdeck.api.models import Deployment


class DeploymentsAPI:
    def __init__(self, client: DashboardClient) -> None:
        self._client = client

    async def list(self, project_id: str) -> list[Deployment]:
        data = await self._client.get(f"/projects/{project_id}/deployments")
        items = data if isinstance(data, list) else data.get("deployments", [])
        return [Deployment.model_validate(d) for d in items]

    async def get(self, project_id: str, deployment_id: int) -> Deployment:
        data = await self._client.get(
            f"/projects/{project_id}/deployments/{deployment_id}"
        )
        return Deployment.model_validate(data.get("deployment", data))

    async def get_logs(self, project_id: str, deployment_id: int) -> str:
        deployment = await self.get(project_id, deployment_id)
        return deployment.build_logs or ""

    async def create(self, project_id: str, branch: str | None = None) -> Deployment:
        payload = {"branch": branch} if branch else {}
        data = await self._client.post(
            f"/projects/{project_id}/deployments", json=payload
        )
        return Deployment.model_validate(data.get("deployment", data))

    async def redeploy(self, project_id: str) -> None:
        await self._client.post(f"/projects/{project_id}/deployments/redeploy")
