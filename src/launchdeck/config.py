"""Configuration management for Launchdeck.

Reads and writes TOML config at ~/.config/launchdeck/config.toml.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

CONFIG_DIR = Path.home() / ".config" / "launchdeck"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_API_URL = "http://localhost:3000"

ENV_API_URL = "LAUNCHDECK_API_URL"
ENV_TOKEN = "LAUNCHDECK_TOKEN"


@dataclass
class ApiConfig:
    base_url: str = DEFAULT_API_URL
    token: str = ""


@dataclass
class ImportConfig:
    strict: bool = False


@dataclass
class UIConfig:
    theme: str = "dark"
    vim_keys: bool = False
    reveal_by_default: bool = False


@dataclass
class LaunchdeckConfig:
    api: ApiConfig = field(default_factory=ApiConfig)
    imports: ImportConfig = field(default_factory=ImportConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def _read_file() -> dict:
    if not CONFIG_PATH.exists():
        return {}
    try:
        with open(CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return {}


def load_config() -> LaunchdeckConfig:
    """Load config from TOML file, returning defaults if missing or corrupt.

    ``LAUNCHDECK_API_URL`` and ``LAUNCHDECK_TOKEN`` override the file.
    """
    data = _read_file()
    api_data = data.get("api", {})
    import_data = data.get("import", {})
    ui_data = data.get("ui", {})

    config = LaunchdeckConfig(
        api=ApiConfig(
            base_url=api_data.get("base_url", DEFAULT_API_URL),
            token=api_data.get("token", ""),
        ),
        imports=ImportConfig(
            strict=import_data.get("strict", False),
        ),
        ui=UIConfig(
            theme=ui_data.get("theme", "dark"),
            vim_keys=ui_data.get("vim_keys", False),
            reveal_by_default=ui_data.get("reveal_by_default", False),
        ),
    )

    if os.environ.get(ENV_API_URL):
        config.api.base_url = os.environ[ENV_API_URL]
    if os.environ.get(ENV_TOKEN):
        config.api.token = os.environ[ENV_TOKEN]
    return config


def save_config(config: LaunchdeckConfig) -> None:
    """Write config to TOML file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    os.chmod(CONFIG_DIR, 0o700)

    data = {
        "api": {
            "base_url": config.api.base_url,
            "token": config.api.token,
        },
        "import": {
            "strict": config.imports.strict,
        },
        "ui": {
            "theme": config.ui.theme,
            "vim_keys": config.ui.vim_keys,
            "reveal_by_default": config.ui.reveal_by_default,
        },
    }

    with open(CONFIG_PATH, "wb") as f:
        tomli_w.dump(data, f)
    os.chmod(CONFIG_PATH, 0o600)


def has_token() -> bool:
    """Quick check if an API token is configured."""
    config = load_config()
    return bool(config.api.token)
