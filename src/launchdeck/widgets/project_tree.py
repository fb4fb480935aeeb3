"""Left-panel tree widget for navigating projects and their sections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from rich.markup import escape
from textual.widgets import Tree

from launchdeck.api.models import Project


class NodeType(Enum):
    """Identifies what kind of data a tree node represents."""

    PROJECT_ROOT = auto()
    OVERVIEW = auto()
    DEPLOYMENTS = auto()
    ENVIRONMENT = auto()
    BUILD_SETTINGS = auto()
    MEMBERS = auto()


@dataclass
class NodeData:
    """Data attached to each tree node."""

    node_type: NodeType
    project_id: str
    label: str = ""
    project_name: str | None = None
    domain: str | None = None


PROJECT_SECTIONS = [
    ("ℹ Overview", NodeType.OVERVIEW),
    ("Deployments", NodeType.DEPLOYMENTS),
    ("Environment Variables", NodeType.ENVIRONMENT),
    ("Build Settings", NodeType.BUILD_SETTINGS),
    ("Members", NodeType.MEMBERS),
]


class ProjectTree(Tree[NodeData]):
    """Navigation tree for projects and their sections."""

    DEFAULT_CSS = """
    ProjectTree {
        width: 1fr;
        min-width: 30;
        max-width: 55;
        border-right: solid $primary;
        scrollbar-gutter: stable;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("Projects", **kwargs)
        self.show_root = True
        self.guide_depth = 3

    def enable_vim_keys(self) -> None:
        """Add vim-style keybindings to the tree."""
        self._bindings.bind("j", "cursor_down", "Down", show=False)
        self._bindings.bind("k", "cursor_up", "Up", show=False)
        self._bindings.bind("l", "select_cursor", "Expand/Select", show=False)
        self._bindings.bind("h", "cursor_parent", "Collapse/Parent", show=False)
        self._bindings.bind("g", "scroll_home", "Top", show=False)
        self._bindings.bind("G", "scroll_end", "Bottom", show=False)

    def action_cursor_parent(self) -> None:
        """Move to parent node or collapse current node."""
        node = self.cursor_node
        if node is None:
            return
        if node.is_expanded:
            node.collapse()
        elif node.parent is not None:
            self.select_node(node.parent)
            self.scroll_to_node(node.parent)

    def populate_projects(self, projects: list[Project]) -> None:
        """Clear tree and rebuild from the project list."""
        self.clear()
        for project in projects:
            self._add_project_node(project)
        self.root.expand()

    def _add_project_node(self, project: Project) -> None:
        status = project.last_deployment.status if project.last_deployment else "new"
        project_node = self.root.add(
            f"[bold]{escape(project.name)}[/bold] ({status})",
            data=NodeData(
                NodeType.PROJECT_ROOT,
                project.id,
                label=project.name,
                project_name=project.name,
                domain=project.domain,
            ),
            expand=False,
        )
        for label, node_type in PROJECT_SECTIONS:
            project_node.add_leaf(
                label,
                data=NodeData(
                    node_type,
                    project.id,
                    label=label,
                    project_name=project.name,
                    domain=project.domain,
                ),
            )

    def find_project_node(self, project_id: str):
        for node in self.root.children:
            if node.data and node.data.project_id == project_id:
                return node
        return None
