"""Configuration editing screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Static, Button, Input, Switch

from launchdeck.config import load_config, save_config


class ConfigScreen(ModalScreen[bool]):
    """Modal for editing Launchdeck configuration."""

    DEFAULT_CSS = """
    ConfigScreen {
        align: center middle;
    }
    #config-dialog {
        width: 70;
        height: auto;
        max-height: 32;
        border: thick $background 80%;
        background: $surface;
        padding: 1 2;
    }
    .config-field {
        width: 100%;
        margin-bottom: 1;
    }
    .switch-row {
        height: 3;
        layout: horizontal;
        margin-bottom: 1;
    }
    .switch-row Static {
        width: 1fr;
        padding-top: 1;
    }
    .switch-row Switch {
        width: auto;
    }
    #config-buttons {
        width: 100%;
        height: 3;
        align: center middle;
        margin-top: 1;
    }
    #config-buttons Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    def compose(self) -> ComposeResult:
        config = load_config()

        with Vertical(id="config-dialog"):
            yield Static("[bold]Launchdeck Configuration[/bold]")

            yield Static("API Address:")
            yield Input(value=config.api.base_url, id="cfg-api-url", classes="config-field")

            yield Static("API Token:")
            yield Input(
                value=config.api.token,
                password=True,
                id="cfg-token",
                classes="config-field",
            )

            with Horizontal(classes="switch-row"):
                yield Static("Strict .env import (reject unclosed quotes):")
                yield Switch(value=config.imports.strict, id="cfg-strict")

            with Horizontal(classes="switch-row"):
                yield Static("Reveal values by default:")
                yield Switch(value=config.ui.reveal_by_default, id="cfg-reveal")

            with Horizontal(classes="switch-row"):
                yield Static("Vim Keybindings:")
                yield Switch(value=config.ui.vim_keys, id="cfg-vim-keys")

            with Horizontal(id="config-buttons"):
                yield Button("Save", variant="primary", id="cfg-save")
                yield Button("Cancel", variant="default", id="cfg-cancel")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cfg-save":
            self._save()
        else:
            self.dismiss(False)

    def _save(self) -> None:
        config = load_config()

        base_url = self.query_one("#cfg-api-url", Input).value.strip() or config.api.base_url
        token = self.query_one("#cfg-token", Input).value.strip()

        config.api.base_url = base_url
        config.api.token = token
        config.imports.strict = self.query_one("#cfg-strict", Switch).value
        config.ui.reveal_by_default = self.query_one("#cfg-reveal", Switch).value
        config.ui.vim_keys = self.query_one("#cfg-vim-keys", Switch).value

        save_config(config)

        client = getattr(self.app, "api_client", None)
        if token and (
            client is None or token != client.token or base_url != client.base_url
        ):
            from launchdeck.api.client import DashboardClient
            self.app.api_client = DashboardClient(token, base_url)

        self.notify("Configuration saved")
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
