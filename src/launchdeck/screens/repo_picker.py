"""Repository picker modal for starting a new project."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, LoadingIndicator, OptionList, Static
from textual.widgets.option_list import Option

from rich.markup import escape

from launchdeck.api.endpoints.repositories import RepositoriesAPI
from launchdeck.api.exceptions import DashboardAPIError
from launchdeck.api.models import Repository
from launchdeck.config import load_config


class RepoPicker(ModalScreen[Repository | None]):
    """Modal that lists repositories and returns the selected one."""

    DEFAULT_CSS = """
    RepoPicker {
        align: center middle;
    }
    #picker-dialog {
        width: 80;
        height: auto;
        max-height: 80%;
        border: thick $background 80%;
        background: $surface;
        padding: 1 2;
    }
    #picker-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }
    #picker-filter {
        width: 100%;
        margin-bottom: 1;
    }
    #picker-list {
        width: 100%;
        height: auto;
        max-height: 20;
    }
    #picker-loading {
        width: 100%;
        height: 3;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repositories: list[Repository] = []
        self._visible: list[Repository] = []

    def compose(self) -> ComposeResult:
        with Vertical(id="picker-dialog"):
            yield Static("Import Git Repository", id="picker-title")
            yield Input(placeholder="Search repositories...", id="picker-filter")
            yield LoadingIndicator(id="picker-loading")
            yield OptionList(id="picker-list")

    async def on_mount(self) -> None:
        option_list = self.query_one(OptionList)
        option_list.display = False
        config = load_config()
        if config.ui.vim_keys:
            option_list._bindings.bind("j", "cursor_down", "Down", show=False)
            option_list._bindings.bind("k", "cursor_up", "Up", show=False)
        await self._fetch_repositories()

    @staticmethod
    def _format_option(repo: Repository) -> str:
        visibility = "private" if repo.private else "public"
        language = repo.language or "N/A"
        return f"{escape(repo.full_name)}  ({visibility})  {escape(language)}"

    def _show(self, repositories: list[Repository]) -> None:
        option_list = self.query_one(OptionList)
        option_list.clear_options()
        self._visible = repositories
        for repo in repositories:
            option_list.add_option(Option(self._format_option(repo)))

    async def _fetch_repositories(self) -> None:
        loading = self.query_one(LoadingIndicator)
        option_list = self.query_one(OptionList)
        try:
            client = getattr(self.app, "api_client", None)
            if client is None:
                self.notify("No API client available", severity="error")
                self.dismiss(None)
                return
            api = RepositoriesAPI(client)
            self._repositories = await api.list()
            loading.display = False
            option_list.display = True
            self._show(self._repositories)
        except DashboardAPIError as e:
            self.notify(f"Error loading repositories: {e}", severity="error", markup=False)
            self.dismiss(None)
        except Exception as e:
            self.notify(f"Unexpected error: {e}", severity="error", markup=False)
            self.dismiss(None)

    def on_input_changed(self, event: Input.Changed) -> None:
        query = event.value.strip().lower()
        self._show([r for r in self._repositories if query in r.full_name.lower()])

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        index = event.option_index
        if 0 <= index < len(self._visible):
            self.dismiss(self._visible[index])

    def action_cancel(self) -> None:
        self.dismiss(None)
