"""Main Launchdeck application class."""

from __future__ import annotations

from textual.app import App
from textual.binding import Binding

from launchdeck.api.client import DashboardClient
from launchdeck.commands.palette import ProjectCommandProvider
from launchdeck.config import load_config


class LaunchdeckApp(App):
    """Launchdeck - project deployment dashboard TUI."""

    TITLE = "Launchdeck"
    SUB_TITLE = "Project deployments"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
        Binding("ctrl+p", "command_palette", "Commands", show=True),
        Binding("ctrl+r", "refresh", "Refresh", show=True),
        Binding("ctrl+n", "new_project", "New", show=True),
        Binding("ctrl+e", "edit_config", "Config", show=True),
    ]

    COMMANDS = App.COMMANDS | {ProjectCommandProvider}

    api_client: DashboardClient | None = None

    def on_mount(self) -> None:
        config = load_config()
        self.theme = "textual-light" if config.ui.theme == "light" else "textual-dark"
        if not config.api.token:
            from launchdeck.screens.setup import SetupScreen
            self.push_screen(SetupScreen())
        else:
            self.api_client = DashboardClient(config.api.token, config.api.base_url)
            from launchdeck.screens.main import MainScreen
            self.push_screen(MainScreen())

    async def on_unmount(self) -> None:
        if self.api_client:
            await self.api_client.close()

    def action_edit_config(self) -> None:
        from launchdeck.screens.config_screen import ConfigScreen
        self.push_screen(ConfigScreen())

    def action_refresh(self) -> None:
        from launchdeck.screens.main import MainScreen
        screen = self.screen
        if isinstance(screen, MainScreen):
            screen.action_refresh()

    def action_new_project(self) -> None:
        from launchdeck.screens.main import MainScreen
        screen = self.screen
        if isinstance(screen, MainScreen):
            screen.action_new_project()
