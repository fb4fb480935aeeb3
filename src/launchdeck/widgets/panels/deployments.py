"""Deployments panel with history table, build logs and redeploy action."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import DataTable, Static, Button
from textual import work

from rich.markup import escape

from launchdeck.api.endpoints.deployments import DeploymentsAPI
from launchdeck.utils.build_logs import render_build_logs, strip_ansi
from launchdeck.widgets.project_tree import NodeData

STATUS_STYLES = {
    "ready": "green",
    "building": "yellow",
    "queued": "blue",
    "error": "red",
}


def _format_duration(seconds: int | None) -> str:
    if seconds is None:
        return ""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}m {secs}s" if minutes else f"{secs}s"


class DeploymentsPanel(Vertical):
    """Shows deployment history for a project."""

    DEFAULT_CSS = """
    DeploymentsPanel {
        height: 1fr;
    }
    DeploymentsPanel .action-bar {
        height: 3;
        layout: horizontal;
        margin-bottom: 1;
    }
    DeploymentsPanel .action-bar Button {
        margin: 0 1 0 0;
    }
    DeploymentsPanel DataTable {
        height: 2fr;
    }
    DeploymentsPanel #output-scroll {
        height: 1fr;
        min-height: 6;
        border: solid $primary;
        margin-top: 1;
    }
    DeploymentsPanel #deployment-output {
        padding: 1;
    }
    """

    def __init__(self, node_data: NodeData, **kwargs) -> None:
        super().__init__(**kwargs)
        self.node_data = node_data

    def compose(self) -> ComposeResult:
        name = self.node_data.project_name or self.node_data.label
        yield Static(f"[bold]Deployments - {escape(name)}[/bold]", classes="panel-title")
        with Vertical(classes="action-bar"):
            yield Button("Deploy Now", id="btn-deploy", variant="primary")
            yield Button("Redeploy", id="btn-redeploy", variant="warning")
            yield Button("Refresh", id="btn-refresh", variant="default")
        yield DataTable(id="deployments-table", cursor_type="row")
        with VerticalScroll(id="output-scroll"):
            yield Static("", id="deployment-output")

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.add_columns("ID", "Status", "Branch", "Commit", "Message", "Created", "Duration")
        self.load_data()

    @work(exclusive=True)
    async def load_data(self) -> None:
        table = self.query_one(DataTable)
        table.loading = True
        try:
            api = DeploymentsAPI(self.app.api_client)
            deployments = await api.list(self.node_data.project_id)
            table.clear()
            for d in deployments:
                style = STATUS_STYLES.get(d.status, "white")
                table.add_row(
                    str(d.id),
                    f"[{style}]{d.status}[/{style}]",
                    escape(d.branch or ""),
                    (d.commit or "")[:7],
                    escape((d.commit_message or "")[:40]),
                    d.created_at or "",
                    _format_duration(d.duration),
                    key=str(d.id),
                )
        except Exception as e:
            self.notify(f"Error loading deployments: {e}", severity="error", markup=False)
        finally:
            table.loading = False

    @work(exclusive=True, group="output")
    async def load_output(self, deployment_id: int) -> None:
        output_widget = self.query_one("#deployment-output", Static)
        output_widget.update("[dim]Loading build logs...[/dim]")
        try:
            api = DeploymentsAPI(self.app.api_client)
            logs = await api.get_logs(self.node_data.project_id, deployment_id)
            output_widget.update(
                f"[bold]Deployment #{deployment_id} Build Logs:[/bold]\n\n{render_build_logs(logs)}"
            )
            self.query_one("#output-scroll", VerticalScroll).scroll_end(animate=False)
        except Exception as e:
            output_widget.update(f"[red]Error: {escape(strip_ansi(str(e)))}[/red]")

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        deployment_id = int(str(event.row_key.value))
        self.load_output(deployment_id)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-deploy":
            self._confirm_deploy()
        elif event.button.id == "btn-redeploy":
            self._redeploy()
        elif event.button.id == "btn-refresh":
            self.load_data()

    @work
    async def _confirm_deploy(self) -> None:
        from launchdeck.screens.confirm import ConfirmModal

        confirmed = await self.app.push_screen_wait(
            ConfirmModal("Deploy this project now?", "Deploy")
        )
        if confirmed:
            try:
                api = DeploymentsAPI(self.app.api_client)
                await api.create(self.node_data.project_id)
            except Exception as e:
                self.notify(f"Deploy failed: {e}", severity="error", markup=False)
                return
            self.notify("Deployment started")
            self.load_data()

    @work
    async def _redeploy(self) -> None:
        try:
            api = DeploymentsAPI(self.app.api_client)
            await api.redeploy(self.node_data.project_id)
        except Exception as e:
            self.notify(f"Redeploy failed: {e}", severity="error", markup=False)
            return
        self.notify("Redeploy started")
        self.load_data()
