"""Project overview display panel."""

from __future__ import annotations

import webbrowser

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static, Button
from textual import work

from rich.markup import escape

from launchdeck.api.endpoints.projects import ProjectsAPI
from launchdeck.widgets.project_tree import NodeData


class OverviewPanel(Vertical):
    """Displays project details and the latest deployment."""

    DEFAULT_CSS = """
    OverviewPanel {
        height: auto;
    }
    OverviewPanel .action-bar {
        margin-top: 1;
        height: 3;
        layout: horizontal;
    }
    OverviewPanel .action-bar Button {
        margin: 0 1 0 0;
    }
    """

    def __init__(self, node_data: NodeData, **kwargs) -> None:
        super().__init__(**kwargs)
        self.node_data = node_data

    def compose(self) -> ComposeResult:
        name = self.node_data.project_name or self.node_data.label
        yield Static(f"[bold]Project: {escape(name)}[/bold]", classes="panel-title")
        yield Static("[dim]Loading...[/dim]", id="overview-content")
        with Vertical(classes="action-bar"):
            yield Button("Open in Browser", id="btn-browser", variant="primary")
            yield Button("Delete Project", id="btn-delete", variant="error")

    def on_mount(self) -> None:
        self.load_data()

    @work(exclusive=True)
    async def load_data(self) -> None:
        content = self.query_one("#overview-content", Static)
        try:
            api = ProjectsAPI(self.app.api_client)
            project = await api.get(self.node_data.project_id)

            repo = project.repository
            last = project.last_deployment
            services = [
                name for name, enabled in (
                    ("PostgreSQL", project.db_type == "postgresql"),
                    ("Redis", project.use_redis),
                    ("Elasticsearch", project.use_elasticsearch),
                ) if enabled
            ]
            info_lines = [
                f"[b]Name:[/b]             {escape(project.name)}",
                f"[b]Domain:[/b]           {escape(project.domain or 'N/A')}",
                f"[b]Repository:[/b]       {escape(repo.full_name if repo else project.repository_url or 'N/A')}",
                f"[b]Branch:[/b]           {escape(repo.default_branch if repo else 'N/A')}",
                f"[b]Port:[/b]             {project.port or 'N/A'}",
                f"[b]Services:[/b]         {', '.join(services) or 'None'}",
                f"[b]Last Deployment:[/b]  {last.status if last else 'Never deployed'}",
                f"[b]Created:[/b]          {project.created_at or 'N/A'}",
            ]
            if project.domain:
                self.node_data.domain = project.domain
            content.update("\n".join(info_lines))
        except Exception as e:
            content.update(f"[red]Error: {escape(str(e))}[/red]")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-browser":
            if self.node_data.domain:
                webbrowser.open(f"https://{self.node_data.domain}")
            else:
                self.notify("Project has no domain yet", severity="warning")
        elif event.button.id == "btn-delete":
            self._confirm_delete()

    @work
    async def _confirm_delete(self) -> None:
        from launchdeck.screens.confirm import ConfirmModal

        name = self.node_data.project_name or self.node_data.project_id
        confirmed = await self.app.push_screen_wait(
            ConfirmModal(
                f"Delete project {escape(name)}?",
                "Delete",
                detail="Deployments, settings and variables are removed. This cannot be undone.",
                destructive=True,
            )
        )
        if not confirmed:
            return
        try:
            api = ProjectsAPI(self.app.api_client)
            await api.delete(self.node_data.project_id)
        except Exception as e:
            self.notify(f"Delete failed: {e}", severity="error", markup=False)
            return
        self.notify("Project deleted")
        self.app.action_refresh()
