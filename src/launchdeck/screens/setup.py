"""First-run setup screen for the dashboard URL and API token."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical, Center
from textual.screen import Screen
from textual.widgets import Static, Button, Input
from textual import work

from rich.markup import escape

from launchdeck.api.client import DashboardClient
from launchdeck.api.exceptions import DashboardAuthenticationError
from launchdeck.config import load_config, save_config


class SetupScreen(Screen):
    """First-run screen to collect and validate the API token."""

    DEFAULT_CSS = """
    SetupScreen {
        align: center middle;
    }
    #setup-container {
        width: 70;
        height: auto;
        max-height: 24;
        border: thick $primary;
        background: $surface;
        padding: 2 4;
    }
    #setup-container Static {
        margin-bottom: 1;
    }
    #api-url-input, #api-token-input {
        width: 100%;
        margin-bottom: 1;
    }
    #setup-save-btn {
        width: 100%;
    }
    #setup-status {
        height: 1;
        margin-top: 1;
    }
    """

    def compose(self) -> ComposeResult:
        config = load_config()
        with Center():
            with Vertical(id="setup-container"):
                yield Static("[bold]Welcome to Launchdeck[/bold]")
                yield Static("Enter the dashboard API address and your access token.")
                yield Input(
                    value=config.api.base_url,
                    placeholder="http://localhost:3000",
                    id="api-url-input",
                )
                yield Input(
                    placeholder="Your API token...",
                    password=True,
                    id="api-token-input",
                )
                yield Button("Save & Continue", variant="primary", id="setup-save-btn")
                yield Static("", id="setup-status")

    def on_mount(self) -> None:
        self.query_one("#api-token-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._save_and_validate()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "setup-save-btn":
            self._save_and_validate()

    @work(exclusive=True)
    async def _save_and_validate(self) -> None:
        base_url = self.query_one("#api-url-input", Input).value.strip()
        token = self.query_one("#api-token-input", Input).value.strip()
        status = self.query_one("#setup-status", Static)

        if not base_url or not token:
            status.update("[red]API address and token are required[/red]")
            return

        status.update("[dim]Validating token...[/dim]")

        client = DashboardClient(token, base_url)
        try:
            await client.get("/projects")
        except DashboardAuthenticationError:
            status.update("[red]Invalid API token. Please try again.[/red]")
            await client.close()
            return
        except Exception as e:
            status.update(f"[red]Connection error: {escape(str(e))}[/red]")
            await client.close()
            return

        config = load_config()
        config.api.base_url = base_url
        config.api.token = token
        save_config(config)

        self.app.api_client = client

        from launchdeck.screens.main import MainScreen
        self.app.switch_screen(MainScreen())
