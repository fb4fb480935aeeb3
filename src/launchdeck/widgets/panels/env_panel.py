"""Environment variables panel with .env import."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, DataTable, Static
from textual import work

from rich.markup import escape

from launchdeck.api.endpoints.projects import ProjectsAPI
from launchdeck.api.models import ProjectSettings
from launchdeck.config import load_config
from launchdeck.utils.env_parser import EnvParseError
from launchdeck.utils.env_session import EnvEditorError, EnvEditorSession
from launchdeck.widgets.project_tree import NodeData


def _one_line(value: str) -> str:
    return escape(value.replace("\r", "").replace("\n", "⏎"))


class EnvironmentPanel(Vertical):
    """Shows a project's variables (masked) and imports .env files."""

    DEFAULT_CSS = """
    EnvironmentPanel {
        height: 1fr;
    }
    EnvironmentPanel .action-bar {
        height: 3;
        layout: horizontal;
        margin-bottom: 1;
    }
    EnvironmentPanel .action-bar Button {
        margin: 0 1 0 0;
    }
    EnvironmentPanel DataTable {
        height: 1fr;
    }
    EnvironmentPanel #env-status {
        height: 1;
        margin-top: 1;
    }
    """

    def __init__(self, node_data: NodeData, **kwargs) -> None:
        super().__init__(**kwargs)
        self.node_data = node_data
        config = load_config()
        self._strict = config.imports.strict
        self.session = EnvEditorSession(reveal_by_default=config.ui.reveal_by_default)
        self._settings = ProjectSettings()
        self._selected_key: str | None = None

    def compose(self) -> ComposeResult:
        yield Static("[bold]Environment Variables[/bold]", classes="panel-title")
        with Vertical(classes="action-bar"):
            yield Button("Import .env", id="btn-import", variant="primary")
            yield Button("Add", id="btn-add", variant="default")
            yield Button("Edit", id="btn-edit", variant="default")
            yield Button("Reveal", id="btn-reveal", variant="default")
            yield Button("Delete", id="btn-delete", variant="error")
            yield Button("Save", id="btn-save", variant="success")
        yield DataTable(id="env-table", cursor_type="row")
        yield Static("", id="env-status")

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.add_columns("Key", "Value")
        self.load_data()

    @work(exclusive=True)
    async def load_data(self) -> None:
        table = self.query_one(DataTable)
        table.loading = True
        try:
            api = ProjectsAPI(self.app.api_client)
            self._settings = await api.get_settings(self.node_data.project_id)
            self.session.reset(self._settings.env_variables)
            self.refresh_table()
        except Exception as e:
            self.notify(f"Error loading variables: {e}", severity="error", markup=False)
        finally:
            table.loading = False

    def refresh_table(self) -> None:
        table = self.query_one(DataTable)
        table.clear()
        for key in self.session.keys:
            table.add_row(
                escape(key),
                _one_line(self.session.display_value(key)),
                key=key,
            )
        status = self.query_one("#env-status", Static)
        if not len(self.session):
            status.update("[dim]No environment variables configured[/dim]")
        elif self.session.dirty:
            status.update(f"[yellow]{len(self.session)} variables, unsaved changes[/yellow]")
        else:
            status.update(f"[dim]{len(self.session)} variables[/dim]")

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        self._selected_key = str(event.row_key.value) if event.row_key else None

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-import":
            self._import_file()
        elif event.button.id == "btn-add":
            self._add_variable()
        elif event.button.id == "btn-edit":
            self._edit_variable()
        elif event.button.id == "btn-reveal":
            self.toggle_selected()
        elif event.button.id == "btn-delete":
            self._delete_variable()
        elif event.button.id == "btn-save":
            self._save()

    def toggle_selected(self) -> None:
        if self._selected_key is None or self._selected_key not in self.session:
            self.notify("Select a variable first", severity="warning")
            return
        self.session.toggle_reveal(self._selected_key)
        self.refresh_table()

    @work(exclusive=True, group="import")
    async def _import_file(self) -> None:
        from launchdeck.screens.input_modal import InputModal, existing_file

        path = await self.app.push_screen_wait(
            InputModal(
                "Import .env file", placeholder="path/to/.env", validator=existing_file
            )
        )
        if not path:
            return
        try:
            content = await asyncio.to_thread(
                Path(path).expanduser().read_text, encoding="utf-8"
            )
        except (OSError, UnicodeDecodeError) as e:
            self.notify(f"Could not read {path}: {e}", severity="error", markup=False)
            return
        await self.apply_import(content)

    async def apply_import(self, content: str) -> None:
        """Merge parsed content into the session and persist the result."""
        try:
            report = self.session.import_text(content, strict=self._strict)
        except EnvParseError as e:
            self.notify(f"Import rejected: {e}", severity="error", markup=False)
            return

        for warning in report.unterminated:
            self.notify(warning.message, severity="warning", markup=False)

        if not report.entries:
            self.notify("No environment variables found in file", severity="warning")
            return

        self.refresh_table()
        try:
            api = ProjectsAPI(self.app.api_client)
            self._settings = await api.save_env_variables(
                self.node_data.project_id, self._settings, self.session.to_payload()
            )
            self.session.mark_saved()
            self.refresh_table()
            self.notify(f"Loaded and saved {len(report.entries)} environment variables.")
        except Exception as e:
            self.notify(
                f"Failed to auto-save imported variables: {e}",
                severity="error",
                markup=False,
            )

    def _apply_stored(self, change: Callable[[], None]) -> None:
        """Apply a single-key change the API has already stored.

        Unsaved changes from before (a failed import save) keep the
        session dirty.
        """
        was_clean = not self.session.dirty
        change()
        if was_clean:
            self.session.mark_saved()

    @work
    async def _add_variable(self) -> None:
        from launchdeck.screens.env_var_modal import EnvVarModal

        result = await self.app.push_screen_wait(EnvVarModal())
        if not result:
            return
        key, value, target = result
        try:
            api = ProjectsAPI(self.app.api_client)
            await api.add_env_variable(self.node_data.project_id, key, value, target)
            self._apply_stored(lambda: self.session.add(key, value))
        except EnvEditorError as e:
            self.notify(str(e), severity="error", markup=False)
            return
        except Exception as e:
            self.notify(f"Failed to add variable: {e}", severity="error", markup=False)
            return
        self.refresh_table()
        self.notify(f"{key} has been added to {target} environment.", markup=False)

    @work
    async def _edit_variable(self) -> None:
        from launchdeck.screens.env_var_modal import EnvVarModal

        key = self._selected_key
        if key is None or key not in self.session:
            self.notify("Select a variable first", severity="warning")
            return
        result = await self.app.push_screen_wait(
            EnvVarModal(key=key, value=self.session.get(key) or "")
        )
        if not result:
            return
        _, value, _ = result
        try:
            api = ProjectsAPI(self.app.api_client)
            await api.add_env_variable(self.node_data.project_id, key, value)
            self._apply_stored(lambda: self.session.edit(key, value))
        except Exception as e:
            self.notify(f"Failed to update variable: {e}", severity="error", markup=False)
            return
        self.refresh_table()
        self.notify(f"{key} has been updated.", markup=False)

    @work
    async def _delete_variable(self) -> None:
        from launchdeck.screens.confirm import ConfirmModal

        key = self._selected_key
        if key is None or key not in self.session:
            self.notify("Select a variable first", severity="warning")
            return
        confirmed = await self.app.push_screen_wait(
            ConfirmModal(
                f"Delete environment variable {escape(key)}?",
                "Delete",
                destructive=True,
            )
        )
        if not confirmed:
            return
        try:
            api = ProjectsAPI(self.app.api_client)
            await api.delete_env_variable(self.node_data.project_id, key)
            self._apply_stored(lambda: self.session.delete(key))
        except Exception as e:
            self.notify(f"Failed to delete variable: {e}", severity="error", markup=False)
            return
        self._selected_key = None
        self.refresh_table()
        self.notify("Environment variable deleted")

    @work(exclusive=True, group="save")
    async def _save(self) -> None:
        try:
            api = ProjectsAPI(self.app.api_client)
            self._settings = await api.save_env_variables(
                self.node_data.project_id, self._settings, self.session.to_payload()
            )
            self.session.mark_saved()
            self.refresh_table()
            self.notify("Environment variables saved")
        except Exception as e:
            self.notify(f"Failed to save: {e}", severity="error", markup=False)
