"""Right-side detail panel that swaps content based on tree selection."""

from __future__ import annotations

from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from launchdeck.widgets.project_tree import NodeData, NodeType


class DetailPanel(VerticalScroll):
    """Right-side panel that displays content based on tree selection."""

    DEFAULT_CSS = """
    DetailPanel {
        width: 3fr;
        padding: 1 2;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._current_panel: Widget | None = None

    def compose(self):
        yield Static(
            "[dim]Select a project section from the tree.[/dim]",
            id="placeholder",
        )

    @property
    def current_panel(self) -> Widget | None:
        return self._current_panel

    async def show_panel(self, node_data: NodeData) -> None:
        """Swap displayed panel based on selected node data."""
        if self._current_panel is not None:
            await self._current_panel.remove()
            self._current_panel = None

        for widget in self.query("#placeholder"):
            await widget.remove()

        panel_class = _get_panel_class(node_data.node_type)
        if panel_class is None:
            fallback = Static(f"[dim]No panel for {node_data.node_type.name}[/dim]")
            await self.mount(fallback)
            self._current_panel = fallback
            return

        panel = panel_class(node_data=node_data)
        await self.mount(panel)
        self._current_panel = panel


def _get_panel_class(node_type: NodeType) -> type[Widget] | None:
    """Lazy import and return the panel class for a given node type."""
    from launchdeck.widgets.panels.overview import OverviewPanel
    from launchdeck.widgets.panels.deployments import DeploymentsPanel
    from launchdeck.widgets.panels.env_panel import EnvironmentPanel
    from launchdeck.widgets.panels.build_settings import BuildSettingsPanel
    from launchdeck.widgets.panels.members_panel import MembersPanel

    registry: dict[NodeType, type[Widget]] = {
        NodeType.OVERVIEW: OverviewPanel,
        NodeType.DEPLOYMENTS: DeploymentsPanel,
        NodeType.ENVIRONMENT: EnvironmentPanel,
        NodeType.BUILD_SETTINGS: BuildSettingsPanel,
        NodeType.MEMBERS: MembersPanel,
    }

    return registry.get(node_type)
