"""Pydantic models for dashboard API responses."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _DashboardModel(BaseModel):
    """Base model: camelCase on the wire, extra fields ignored."""
    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _none_to_dict(v: dict | None) -> dict:
    """Coerce None to empty dict for API fields that may return null."""
    return v if v is not None else {}


def _none_to_false(v: bool | None) -> bool:
    """Coerce None to False for API fields that may return null."""
    return v if v is not None else False


DeploymentStatus = Literal["building", "ready", "error", "queued"]
DatabaseType = Literal["none", "postgresql"]
EnvTarget = Literal["all", "production", "preview", "development"]


class Repository(_DashboardModel):
    id: str
    name: str
    full_name: str
    description: str | None = None
    url: str | None = None
    default_branch: str = "main"
    language: str | None = None
    private: bool = False
    updated_at: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        return str(v)

    @field_validator("private", mode="before")
    @classmethod
    def _coerce_bools(cls, v):
        return _none_to_false(v)


class Deployment(_DashboardModel):
    id: int
    project_id: str | None = None
    status: DeploymentStatus = "queued"
    branch: str | None = None
    commit: str | None = None
    commit_message: str | None = None
    created_at: str | None = None
    duration: int | None = None
    url: str | None = None
    build_logs: str | None = None

    @field_validator("project_id", mode="before")
    @classmethod
    def _coerce_project_id(cls, v):
        return str(v) if v is not None else None


class Project(_DashboardModel):
    id: str
    name: str
    repository: Repository | None = None
    repository_url: str | None = None
    domain: str | None = None
    port: int | None = None
    db_type: DatabaseType = "none"
    use_redis: bool = False
    use_elasticsearch: bool = False
    last_deployment: Deployment | None = None
    created_at: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        return str(v)

    @field_validator("db_type", mode="before")
    @classmethod
    def _coerce_db_type(cls, v):
        return v or "none"

    @field_validator("use_redis", "use_elasticsearch", mode="before")
    @classmethod
    def _coerce_bools(cls, v):
        return _none_to_false(v)


class ProjectSettings(_DashboardModel):
    install_command: str = ""
    output_dir: str = ""
    port: int = 30001
    db_type: DatabaseType = "none"
    use_redis: bool = False
    use_elasticsearch: bool = False
    env_variables: dict[str, str] = Field(default_factory=dict)

    @field_validator("install_command", "output_dir", mode="before")
    @classmethod
    def _coerce_strings(cls, v):
        return v if v is not None else ""

    @field_validator("port", mode="before")
    @classmethod
    def _coerce_port(cls, v):
        return v or 30001

    @field_validator("db_type", mode="before")
    @classmethod
    def _coerce_db_type(cls, v):
        return v or "none"

    @field_validator("use_redis", "use_elasticsearch", mode="before")
    @classmethod
    def _coerce_bools(cls, v):
        return _none_to_false(v)

    @field_validator("env_variables", mode="before")
    @classmethod
    def _coerce_env(cls, v):
        return _none_to_dict(v)


class EnvVariable(_DashboardModel):
    key: str
    value: str
    target: EnvTarget = "all"


class Member(_DashboardModel):
    id: int
    username: str
    avatar_url: str | None = None
    role: str | None = None


class ProjectDraft(_DashboardModel):
    """Payload for creating a project from a repository."""

    repository_id: str
    repository_url: str | None = None
    framework: str
    install_command: str = ""
    output_dir: str = ""
    env_variables: dict[str, str] = Field(default_factory=dict)
    project_name: str
    domain: str
    port: int | None = None
    db_type: DatabaseType = "none"
    use_redis: bool = False
    use_elasticsearch: bool = False
