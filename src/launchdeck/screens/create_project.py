"""Project creation form shown after picking a repository."""

from __future__ import annotations

import asyncio
from pathlib import Path

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, DataTable, Input, Select, Static, Switch
from textual import work

from rich.markup import escape

from launchdeck.api.models import ProjectDraft, Repository
from launchdeck.config import load_config
from launchdeck.utils.env_parser import EnvParseError
from launchdeck.utils.env_session import EnvEditorError, EnvEditorSession
from launchdeck.utils.project_setup import (
    DEFAULT_ROOT_DOMAIN,
    FRAMEWORKS,
    ROOT_DOMAINS,
    ProjectSetupError,
    build_domain,
    framework_defaults,
    is_backend,
    validate_project_name,
)


class CreateProjectScreen(ModalScreen[ProjectDraft | None]):
    """Collects framework, build, domain, services and env variables."""

    DEFAULT_CSS = """
    CreateProjectScreen {
        align: center middle;
    }
    #create-dialog {
        width: 90;
        height: 90%;
        border: thick $background 80%;
        background: $surface;
        padding: 1 2;
    }
    #create-dialog .form-field {
        width: 100%;
        margin-bottom: 1;
    }
    #create-dialog .switch-row {
        height: 3;
        layout: horizontal;
    }
    #create-dialog .switch-row Static {
        width: 1fr;
        padding-top: 1;
    }
    #create-dialog .switch-row Switch {
        width: auto;
    }
    #create-dialog .env-bar, #create-buttons {
        height: 3;
        layout: horizontal;
        margin-bottom: 1;
    }
    #create-dialog .env-bar Button, #create-buttons Button {
        margin: 0 1 0 0;
    }
    #create-env-table {
        height: 10;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(self, repository: Repository, **kwargs) -> None:
        super().__init__(**kwargs)
        self.repository = repository
        config = load_config()
        self._strict = config.imports.strict
        self.session = EnvEditorSession(reveal_by_default=config.ui.reveal_by_default)
        self._selected_key: str | None = None

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="create-dialog"):
            yield Static(f"[bold]Configure Project[/bold]  {escape(self.repository.full_name)}")
            yield Static("Project Name:")
            yield Input(value=self.repository.name, id="proj-name", classes="form-field")
            yield Static("Framework Preset:")
            yield Select(
                [(f.label, f.value) for f in FRAMEWORKS],
                prompt="Select a framework",
                id="proj-framework",
                classes="form-field",
            )
            yield Static("Install Command:")
            yield Input(id="proj-install", classes="form-field")
            yield Static("Output Directory:")
            yield Input(id="proj-output", classes="form-field")
            yield Static("Port:", id="proj-port-label")
            yield Input(value="30001", type="integer", id="proj-port", classes="form-field")
            yield Static("Domain:")
            yield Select(
                [(d, d) for d in ROOT_DOMAINS],
                value=DEFAULT_ROOT_DOMAIN,
                allow_blank=False,
                id="proj-domain",
                classes="form-field",
            )
            with Horizontal(classes="switch-row"):
                yield Static("Use root domain only:")
                yield Switch(id="proj-root-only")
            yield Static("", id="proj-domain-preview", classes="form-field")
            yield Static("Database:")
            yield Select(
                [("None", "none"), ("PostgreSQL", "postgresql")],
                value="none",
                allow_blank=False,
                id="proj-db",
                classes="form-field",
            )
            with Horizontal(classes="switch-row"):
                yield Static("Redis:")
                yield Switch(id="proj-redis")
            with Horizontal(classes="switch-row"):
                yield Static("Elasticsearch:")
                yield Switch(id="proj-elasticsearch")
            yield Static("[bold]Environment Variables[/bold]")
            with Horizontal(classes="env-bar"):
                yield Button("Import .env", id="btn-env-import", variant="default")
                yield Button("Add", id="btn-env-add", variant="default")
                yield Button("Reveal", id="btn-env-reveal", variant="default")
                yield Button("Remove", id="btn-env-remove", variant="default")
            yield DataTable(id="create-env-table", cursor_type="row")
            with Horizontal(id="create-buttons"):
                yield Button("Deploy", variant="primary", id="create-ok")
                yield Button("Cancel", variant="default", id="create-cancel")

    def on_mount(self) -> None:
        self.query_one("#create-env-table", DataTable).add_columns("Key", "Value")
        self._set_port_visible(False)
        self._update_domain_preview()
        self.query_one("#proj-name", Input).focus()

    def _set_port_visible(self, visible: bool) -> None:
        self.query_one("#proj-port-label", Static).display = visible
        self.query_one("#proj-port", Input).display = visible

    def _update_domain_preview(self) -> None:
        name = self.query_one("#proj-name", Input).value.strip() or "<name>"
        root = str(self.query_one("#proj-domain", Select).value)
        root_only = self.query_one("#proj-root-only", Switch).value
        preview = self.query_one("#proj-domain-preview", Static)
        preview.update(f"[dim]{escape(build_domain(name, root, root_only))}[/dim]")

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "proj-framework":
            value = "" if event.value == Select.BLANK else str(event.value)
            install, output = framework_defaults(value)
            self.query_one("#proj-install", Input).value = install
            self.query_one("#proj-output", Input).value = output
            self._set_port_visible(is_backend(value))
        elif event.select.id == "proj-domain":
            self._update_domain_preview()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "proj-name":
            self._update_domain_preview()

    def on_switch_changed(self, event: Switch.Changed) -> None:
        if event.switch.id == "proj-root-only":
            self._update_domain_preview()

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        self._selected_key = str(event.row_key.value) if event.row_key else None

    def refresh_env_table(self) -> None:
        table = self.query_one("#create-env-table", DataTable)
        table.clear()
        for key in self.session.keys:
            value = self.session.display_value(key).replace("\n", "⏎")
            table.add_row(escape(key), escape(value), key=key)

    def apply_import(self, content: str) -> int:
        """Merge parsed content into the form's variables; returns entries read."""
        try:
            report = self.session.import_text(content, strict=self._strict)
        except EnvParseError as e:
            self.notify(f"Import rejected: {e}", severity="error", markup=False)
            return 0
        for warning in report.unterminated:
            self.notify(warning.message, severity="warning", markup=False)
        if report.entries:
            self.refresh_env_table()
            self.notify(f"Loaded {len(report.entries)} environment variables.")
        else:
            self.notify("No environment variables found in file", severity="warning")
        return len(report.entries)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "create-ok":
            self._submit()
        elif button_id == "create-cancel":
            self.dismiss(None)
        elif button_id == "btn-env-import":
            self._import_file()
        elif button_id == "btn-env-add":
            self._add_variable()
        elif button_id == "btn-env-reveal":
            if self._selected_key in self.session:
                self.session.toggle_reveal(self._selected_key)
                self.refresh_env_table()
        elif button_id == "btn-env-remove":
            if self._selected_key in self.session:
                self.session.delete(self._selected_key)
                self._selected_key = None
                self.refresh_env_table()

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
        self.apply_import(content)

    @work
    async def _add_variable(self) -> None:
        from launchdeck.screens.env_var_modal import EnvVarModal

        result = await self.app.push_screen_wait(EnvVarModal())
        if not result:
            return
        key, value, _ = result
        try:
            self.session.add(key, value)
        except EnvEditorError as e:
            self.notify(str(e), severity="error", markup=False)
            return
        self.refresh_env_table()

    def build_draft(self) -> ProjectDraft:
        """Validate the form and build the creation payload."""
        name = validate_project_name(self.query_one("#proj-name", Input).value)
        framework_select = self.query_one("#proj-framework", Select)
        if framework_select.value == Select.BLANK:
            raise ProjectSetupError("Select a framework preset")
        framework = str(framework_select.value)
        port_text = self.query_one("#proj-port", Input).value.strip()
        return ProjectDraft(
            repository_id=self.repository.id,
            repository_url=self.repository.url,
            framework=framework,
            install_command=self.query_one("#proj-install", Input).value.strip(),
            output_dir=self.query_one("#proj-output", Input).value.strip(),
            env_variables=self.session.to_payload(),
            project_name=name,
            domain=build_domain(
                name,
                str(self.query_one("#proj-domain", Select).value),
                self.query_one("#proj-root-only", Switch).value,
            ),
            port=int(port_text) if is_backend(framework) and port_text else None,
            db_type=str(self.query_one("#proj-db", Select).value),
            use_redis=self.query_one("#proj-redis", Switch).value,
            use_elasticsearch=self.query_one("#proj-elasticsearch", Switch).value,
        )

    def _submit(self) -> None:
        try:
            draft = self.build_draft()
        except ProjectSetupError as e:
            self.notify(str(e), severity="error", markup=False)
            return
        self.dismiss(draft)

    def action_cancel(self) -> None:
        self.dismiss(None)
