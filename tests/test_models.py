"""Tests for Pydantic models with dashboard API edge cases."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from launchdeck.api.models import (
    Deployment,
    EnvVariable,
    Member,
    Project,
    ProjectDraft,
    ProjectSettings,
    Repository,
)


class TestCamelCaseAliases:
    def test_repository_from_api(self, sample_repository_data):
        repo = Repository.model_validate(sample_repository_data)
        assert repo.full_name == "acme/shop-frontend"
        assert repo.default_branch == "main"
        assert repo.private is True

    def test_populate_by_field_name(self):
        repo = Repository(id="1", name="r", full_name="o/r")
        assert repo.full_name == "o/r"

    def test_project_nested(self, sample_project):
        assert sample_project.repository.full_name == "acme/shop-frontend"
        assert sample_project.last_deployment.commit_message == "Fix checkout"
        assert sample_project.last_deployment.project_id == "7"

    def test_dump_by_alias(self):
        settings = ProjectSettings(use_redis=True)
        data = settings.model_dump(by_alias=True)
        assert data["useRedis"] is True
        assert "use_redis" not in data


class TestNullCoercion:
    def test_project_null_bools(self, sample_project):
        assert sample_project.use_elasticsearch is False

    def test_project_null_db_type(self):
        assert Project(id=1, name="p", db_type=None).db_type == "none"

    def test_settings_nulls(self):
        settings = ProjectSettings.model_validate({
            "installCommand": None,
            "outputDir": None,
            "port": None,
            "dbType": None,
            "useRedis": None,
            "envVariables": None,
        })
        assert settings.install_command == ""
        assert settings.output_dir == ""
        assert settings.port == 30001
        assert settings.db_type == "none"
        assert settings.use_redis is False
        assert settings.env_variables == {}

    def test_repository_null_private(self):
        assert Repository(id=1, name="r", full_name="o/r", private=None).private is False


class TestIdCoercion:
    def test_numeric_ids_become_strings(self):
        assert Project(id=42, name="p").id == "42"
        assert Repository(id=99, name="r", full_name="o/r").id == "99"


class TestValidation:
    def test_unknown_deployment_status_rejected(self):
        with pytest.raises(ValidationError):
            Deployment(id=1, status="exploded")

    def test_deployment_defaults(self):
        d = Deployment(id=1)
        assert d.status == "queued"
        assert d.build_logs is None

    def test_env_variable_default_target(self):
        assert EnvVariable(key="A", value="1").target == "all"

    def test_env_variable_bad_target(self):
        with pytest.raises(ValidationError):
            EnvVariable(key="A", value="1", target="staging")

    def test_extra_fields_ignored(self):
        m = Member.model_validate({"id": 1, "username": "u", "somethingNew": True})
        assert m.username == "u"

    def test_draft_requires_name_and_domain(self):
        with pytest.raises(ValidationError):
            ProjectDraft(repository_id="1", framework="react")
