"""Main application screen with two-pane layout."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Header, Footer
from textual import work

from launchdeck.api.endpoints.projects import ProjectsAPI
from launchdeck.api.exceptions import DashboardAPIError
from launchdeck.api.models import ProjectDraft, Repository
from launchdeck.config import load_config
from launchdeck.widgets.detail_panel import DetailPanel
from launchdeck.widgets.project_tree import ProjectTree, NodeData, NodeType


class MainScreen(Screen):
    """Primary application screen with project tree and detail panel."""

    DEFAULT_CSS = """
    MainScreen {
        layout: vertical;
    }
    #main-container {
        width: 100%;
        height: 1fr;
    }
    """

    BINDINGS = [
        ("ctrl+r", "refresh", "Refresh"),
        ("ctrl+n", "new_project", "New Project"),
    ]

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-container"):
            yield ProjectTree(id="project-tree")
            yield DetailPanel(id="detail-panel")
        yield Footer()

    def on_mount(self) -> None:
        config = load_config()
        if config.ui.vim_keys:
            self.query_one(ProjectTree).enable_vim_keys()
        self.load_projects()

    @work(exclusive=True, group="projects")
    async def load_projects(self) -> None:
        tree = self.query_one(ProjectTree)
        tree.loading = True
        try:
            api = ProjectsAPI(self.app.api_client)
            projects = await api.list()
            tree.populate_projects(projects)
            if not projects:
                self.notify("No projects yet. Press ctrl+n to import a repository.")
        except DashboardAPIError as e:
            self.notify(f"Error loading projects: {e}", severity="error", markup=False)
        except Exception as e:
            self.notify(f"Unexpected error: {e}", severity="error", markup=False)
        finally:
            tree.loading = False

    async def on_tree_node_selected(self, event: ProjectTree.NodeSelected) -> None:
        node_data: NodeData | None = event.node.data
        if node_data is None or node_data.node_type == NodeType.PROJECT_ROOT:
            return

        detail = self.query_one(DetailPanel)
        await detail.show_panel(node_data)

    def action_refresh(self) -> None:
        self.load_projects()

    def action_new_project(self) -> None:
        from launchdeck.screens.repo_picker import RepoPicker

        self.app.push_screen(RepoPicker(), callback=self._on_repository_selected)

    def _on_repository_selected(self, repository: Repository | None) -> None:
        if repository is None:
            return
        from launchdeck.screens.create_project import CreateProjectScreen

        self.app.push_screen(
            CreateProjectScreen(repository), callback=self._on_project_configured
        )

    def _on_project_configured(self, draft: ProjectDraft | None) -> None:
        if draft is not None:
            self._create_project(draft)

    @work(exclusive=True, group="create")
    async def _create_project(self, draft: ProjectDraft) -> None:
        try:
            api = ProjectsAPI(self.app.api_client)
            project = await api.create(draft)
        except DashboardAPIError as e:
            self.notify(f"Failed to create project: {e}", severity="error", markup=False)
            return
        self.notify(f"Project {project.name} created", markup=False)
        self.load_projects()
