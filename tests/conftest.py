"""Shared test fixtures for Launchdeck."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from launchdeck.api.client import DashboardClient
from launchdeck.api.models import Project, Repository
from launchdeck.widgets.project_tree import NodeData, NodeType


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.config/launchdeck."""
    config_dir = tmp_path / ".config" / "launchdeck"
    monkeypatch.setattr("launchdeck.config.CONFIG_DIR", config_dir)
    monkeypatch.setattr("launchdeck.config.CONFIG_PATH", config_dir / "config.toml")
    monkeypatch.delenv("LAUNCHDECK_API_URL", raising=False)
    monkeypatch.delenv("LAUNCHDECK_TOKEN", raising=False)
    return config_dir


@pytest.fixture
def mock_client():
    """A DashboardClient with mocked HTTP methods."""
    client = DashboardClient("test-token")
    client.get = AsyncMock(return_value={})
    client.post = AsyncMock(return_value={})
    client.put = AsyncMock(return_value={})
    client.delete = AsyncMock(return_value={})
    return client


@pytest.fixture
def sample_repository_data():
    """Raw repository API response data."""
    return {
        "id": 12345,
        "name": "shop-frontend",
        "fullName": "acme/shop-frontend",
        "description": "Storefront",
        "url": "https://github.com/acme/shop-frontend",
        "defaultBranch": "main",
        "language": "TypeScript",
        "private": True,
        "updatedAt": "2024-05-01T10:00:00Z",
    }


@pytest.fixture
def sample_project_data(sample_repository_data):
    """Raw project API response data."""
    return {
        "id": 7,
        "name": "shop-frontend",
        "repository": sample_repository_data,
        "domain": "shop-frontend.hyphen.it.com",
        "port": None,
        "dbType": "postgresql",
        "useRedis": True,
        "useElasticsearch": None,
        "lastDeployment": {
            "id": 100,
            "projectId": 7,
            "status": "ready",
            "branch": "main",
            "commit": "a1b2c3d4e5",
            "commitMessage": "Fix checkout",
            "createdAt": "2024-05-02T09:00:00Z",
            "duration": 95,
        },
        "createdAt": "2024-05-01T10:00:00Z",
    }


@pytest.fixture
def sample_settings_data():
    """Raw project settings API response data."""
    return {
        "project": {"id": 7, "name": "shop-frontend"},
        "installCommand": "npm ci",
        "outputDir": "build",
        "port": 30001,
        "dbType": "none",
        "useRedis": False,
        "useElasticsearch": False,
        "envVariables": {"API_URL": "https://api.example.com", "SECRET": "s3cr3t"},
    }


@pytest.fixture
def sample_repository(sample_repository_data):
    return Repository.model_validate(sample_repository_data)


@pytest.fixture
def sample_project(sample_project_data):
    return Project.model_validate(sample_project_data)


@pytest.fixture
def env_node_data():
    """NodeData for a project's environment section."""
    return NodeData(
        node_type=NodeType.ENVIRONMENT,
        project_id="7",
        label="Environment Variables",
        project_name="shop-frontend",
    )
