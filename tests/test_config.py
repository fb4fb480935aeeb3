"""Tests for the configuration module."""

from __future__ import annotations

import pytest
import tomli_w

from launchdeck.config import (
    DEFAULT_API_URL,
    ApiConfig,
    ImportConfig,
    LaunchdeckConfig,
    UIConfig,
    has_token,
    load_config,
    save_config,
)


@pytest.fixture
def config_dir(isolated_config):
    return isolated_config


@pytest.fixture
def config_path(config_dir):
    return config_dir / "config.toml"


def _write(config_dir, config_path, data):
    config_dir.mkdir(parents=True, exist_ok=True)
    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)


class TestLoadConfig:
    def test_returns_defaults_when_no_file(self, config_dir):
        config = load_config()
        assert config.api.base_url == DEFAULT_API_URL
        assert config.api.token == ""
        assert config.imports.strict is False
        assert config.ui.reveal_by_default is False
        assert config.ui.vim_keys is False
        assert config.ui.theme == "dark"

    def test_loads_existing_config(self, config_dir, config_path):
        _write(config_dir, config_path, {
            "api": {"base_url": "https://deploy.example.com", "token": "tok-123"},
            "import": {"strict": True},
            "ui": {"vim_keys": True, "theme": "light", "reveal_by_default": True},
        })

        config = load_config()
        assert config.api.base_url == "https://deploy.example.com"
        assert config.api.token == "tok-123"
        assert config.imports.strict is True
        assert config.ui.vim_keys is True
        assert config.ui.theme == "light"
        assert config.ui.reveal_by_default is True

    def test_returns_defaults_for_missing_sections(self, config_dir, config_path):
        _write(config_dir, config_path, {"api": {"token": "token-only"}})

        config = load_config()
        assert config.api.token == "token-only"
        assert config.api.base_url == DEFAULT_API_URL
        assert config.imports.strict is False

    def test_returns_defaults_on_corrupt_file(self, config_dir, config_path):
        config_dir.mkdir(parents=True, exist_ok=True)
        config_path.write_text("this is not valid toml {{{")

        config = load_config()
        assert config.api.token == ""
        assert config.api.base_url == DEFAULT_API_URL

    def test_environment_overrides_file(self, config_dir, config_path, monkeypatch):
        _write(config_dir, config_path, {"api": {"base_url": "http://file", "token": "file"}})
        monkeypatch.setenv("LAUNCHDECK_API_URL", "http://env")
        monkeypatch.setenv("LAUNCHDECK_TOKEN", "env-token")

        config = load_config()
        assert config.api.base_url == "http://env"
        assert config.api.token == "env-token"


class TestSaveConfig:
    def test_roundtrip(self, config_dir, config_path):
        original = LaunchdeckConfig(
            api=ApiConfig(base_url="https://x.example", token="roundtrip"),
            imports=ImportConfig(strict=True),
            ui=UIConfig(theme="light", vim_keys=True, reveal_by_default=True),
        )
        save_config(original)

        assert config_path.exists()
        assert load_config() == original

    def test_file_is_private(self, config_dir, config_path):
        save_config(LaunchdeckConfig(api=ApiConfig(token="secret")))
        assert config_path.stat().st_mode & 0o777 == 0o600
        assert config_dir.stat().st_mode & 0o777 == 0o700


class TestHasToken:
    def test_no_token(self, config_dir):
        assert has_token() is False

    def test_with_token(self, config_dir, config_path):
        _write(config_dir, config_path, {"api": {"token": "some-token"}})
        assert has_token() is True

    def test_empty_token(self, config_dir, config_path):
        _write(config_dir, config_path, {"api": {"token": ""}})
        assert has_token() is False
