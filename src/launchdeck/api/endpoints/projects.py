"""Project and project settings API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote

from launchdeck.api.client import DashboardClient
from launchdeck.api.models import EnvTarget, Member, Project, ProjectDraft, ProjectSettings


class ProjectsAPI:
    def __init__(self, client: DashboardClient) -> None:
        self._client = client

    async def list(self) -> list[Project]:
        data = await self._client.get("/projects")
        items = data if isinstance(data, list) else data.get("projects", [])
        return [Project.model_validate(p) for p in items]

    async def get(self, project_id: str) -> Project:
        data = await self._client.get(f"/projects/{project_id}")
        return Project.model_validate(data.get("project", data))

    async def create(self, draft: ProjectDraft) -> Project:
        data = await self._client.post(
            "/projects", json=draft.model_dump(by_alias=True)
        )
        return Project.model_validate(data.get("project", data))

    async def delete(self, project_id: str) -> None:
        await self._client.delete(f"/projects/{project_id}")

    async def get_settings(self, project_id: str) -> ProjectSettings:
        data = await self._client.get(f"/projects/{project_id}/settings")
        return ProjectSettings.model_validate(data)

    async def update_settings(self, project_id: str, settings: ProjectSettings) -> None:
        await self._client.post(
            f"/projects/{project_id}/settings",
            json=settings.model_dump(by_alias=True),
        )

    async def save_env_variables(
        self, project_id: str, settings: ProjectSettings, variables: Mapping[str, str]
    ) -> ProjectSettings:
        """Persist a full variable set alongside the current build settings."""
        updated = settings.model_copy(update={"env_variables": dict(variables)})
        await self.update_settings(project_id, updated)
        return updated

    async def add_env_variable(
        self, project_id: str, key: str, value: str, target: EnvTarget = "all"
    ) -> None:
        await self._client.post(
            f"/projects/{project_id}/env",
            json={"key": key, "value": value, "target": target},
        )

    async def delete_env_variable(self, project_id: str, key: str) -> None:
        await self._client.delete(f"/projects/{project_id}/env/{quote(key, safe='')}")

    async def list_members(self, project_id: str) -> list[Member]:
        data = await self._client.get(f"/projects/{project_id}/members")
        items = data if isinstance(data, list) else data.get("members", [])
        return [Member.model_validate(m) for m in items]

    async def invite_member(self, project_id: str, username: str) -> None:
        await self._client.post(
            f"/projects/{project_id}/members", json={"username": username}
        )

    async def remove_member(self, project_id: str, user_id: int) -> None:
        await self._client.delete(f"/projects/{project_id}/members/{user_id}")
