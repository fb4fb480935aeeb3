"""Build configuration panel: install command, output dir and services."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Select, Static, Switch
from textual import work

from launchdeck.api.endpoints.projects import ProjectsAPI
from launchdeck.api.models import ProjectSettings
from launchdeck.widgets.project_tree import NodeData

DB_CHOICES = [("None", "none"), ("PostgreSQL", "postgresql")]


class BuildSettingsPanel(Vertical):
    """Edits the build configuration of a project."""

    DEFAULT_CSS = """
    BuildSettingsPanel {
        height: auto;
    }
    BuildSettingsPanel .settings-field {
        width: 100%;
        margin-bottom: 1;
    }
    BuildSettingsPanel .switch-row {
        height: 3;
        layout: horizontal;
        margin-bottom: 1;
    }
    BuildSettingsPanel .switch-row Static {
        width: 1fr;
        padding-top: 1;
    }
    BuildSettingsPanel .switch-row Switch {
        width: auto;
    }
    BuildSettingsPanel .action-bar {
        height: 3;
        layout: horizontal;
    }
    BuildSettingsPanel .action-bar Button {
        margin: 0 1 0 0;
    }
    """

    def __init__(self, node_data: NodeData, **kwargs) -> None:
        super().__init__(**kwargs)
        self.node_data = node_data

    def compose(self) -> ComposeResult:
        yield Static("[bold]Build & Development Settings[/bold]", classes="panel-title")
        yield Static("Install Command:")
        yield Input(id="set-install", classes="settings-field", placeholder="npm install")
        yield Static("Output Directory:")
        yield Input(id="set-output", classes="settings-field", placeholder="dist")
        yield Static("Port:")
        yield Input(id="set-port", classes="settings-field", type="integer", placeholder="30001")
        yield Static("Database:")
        yield Select(DB_CHOICES, value="none", allow_blank=False, id="set-db", classes="settings-field")
        with Horizontal(classes="switch-row"):
            yield Static("Redis:")
            yield Switch(id="set-redis")
        with Horizontal(classes="switch-row"):
            yield Static("Elasticsearch:")
            yield Switch(id="set-elasticsearch")
        with Vertical(classes="action-bar"):
            yield Button("Save Settings", id="btn-save", variant="primary")
            yield Button("Reload", id="btn-refresh", variant="default")

    def on_mount(self) -> None:
        self.load_data()

    @work(exclusive=True)
    async def load_data(self) -> None:
        try:
            api = ProjectsAPI(self.app.api_client)
            settings = await api.get_settings(self.node_data.project_id)
            self._fill_form(settings)
        except Exception as e:
            self.notify(f"Failed to fetch project settings: {e}", severity="error", markup=False)

    def _fill_form(self, settings: ProjectSettings) -> None:
        self.query_one("#set-install", Input).value = settings.install_command
        self.query_one("#set-output", Input).value = settings.output_dir
        self.query_one("#set-port", Input).value = str(settings.port)
        self.query_one("#set-db", Select).value = settings.db_type
        self.query_one("#set-redis", Switch).value = settings.use_redis
        self.query_one("#set-elasticsearch", Switch).value = settings.use_elasticsearch

    def read_form(self, base: ProjectSettings) -> ProjectSettings:
        """Apply form values over ``base``, keeping its env variables."""
        port_text = self.query_one("#set-port", Input).value.strip()
        return base.model_copy(
            update={
                "install_command": self.query_one("#set-install", Input).value.strip(),
                "output_dir": self.query_one("#set-output", Input).value.strip(),
                "port": int(port_text) if port_text else 30001,
                "db_type": str(self.query_one("#set-db", Select).value),
                "use_redis": self.query_one("#set-redis", Switch).value,
                "use_elasticsearch": self.query_one("#set-elasticsearch", Switch).value,
            }
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-save":
            self._save()
        elif event.button.id == "btn-refresh":
            self.load_data()

    @work(exclusive=True, group="save")
    async def _save(self) -> None:
        try:
            api = ProjectsAPI(self.app.api_client)
            # Re-read so variables edited elsewhere are not overwritten.
            current = await api.get_settings(self.node_data.project_id)
            await api.update_settings(self.node_data.project_id, self.read_form(current))
            self.notify("Your build configuration has been updated.")
        except Exception as e:
            self.notify(f"Failed to save settings: {e}", severity="error", markup=False)
