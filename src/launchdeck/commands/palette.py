"""Command palette providers for quick navigation."""

from __future__ import annotations

import logging
import webbrowser

from textual.command import Provider, Hit, Hits, DiscoveryHit

from launchdeck.api.endpoints.projects import ProjectsAPI
from launchdeck.api.exceptions import DashboardAPIError
from launchdeck.api.models import Project

logger = logging.getLogger(__name__)


class ProjectCommandProvider(Provider):
    """Provides project navigation and action commands."""

    async def startup(self) -> None:
        """Cache the project list when the palette opens."""
        self._projects: list[Project] = []
        client = getattr(self.app, "api_client", None)
        if client is None:
            return
        try:
            self._projects = await ProjectsAPI(client).list()
        except DashboardAPIError as e:
            logger.debug("palette could not load projects: %s", e)

    async def discover(self) -> Hits:
        """Show available commands when palette first opens."""
        yield DiscoveryHit(
            "New Project",
            self._new_project,
            help="Import a repository and configure a project",
        )
        yield DiscoveryHit(
            "Edit Configuration",
            self._open_config,
            help="Edit API address, token and import settings",
        )
        for project in self._projects:
            yield DiscoveryHit(
                f"Project: {project.name}",
                self._navigate_to_project(project),
                help=project.domain or "",
            )

    async def search(self, query: str) -> Hits:
        """Fuzzy search across projects and actions."""
        matcher = self.matcher(query)

        for label, callback in (
            ("New Project", self._new_project),
            ("Edit Configuration", self._open_config),
            ("Refresh Projects", self._refresh),
        ):
            score = matcher.match(label)
            if score > 0:
                yield Hit(score, matcher.highlight(label), callback)

        for project in self._projects:
            label = f"Project: {project.name}"
            score = matcher.match(label)
            if score > 0:
                yield Hit(
                    score,
                    matcher.highlight(label),
                    self._navigate_to_project(project),
                    help=project.domain or "",
                )
            if project.domain:
                open_label = f"Open {project.domain}"
                score = matcher.match(open_label)
                if score > 0:
                    yield Hit(
                        score,
                        matcher.highlight(open_label),
                        self._open_domain(project.domain),
                    )

    def _main_screen(self):
        from launchdeck.screens.main import MainScreen

        screen = self.app.screen
        return screen if isinstance(screen, MainScreen) else None

    def _open_config(self) -> None:
        from launchdeck.screens.config_screen import ConfigScreen
        self.app.push_screen(ConfigScreen())

    def _new_project(self) -> None:
        screen = self._main_screen()
        if screen is not None:
            screen.action_new_project()

    def _refresh(self) -> None:
        screen = self._main_screen()
        if screen is not None:
            screen.action_refresh()

    def _navigate_to_project(self, project: Project):
        def callback() -> None:
            from launchdeck.widgets.project_tree import ProjectTree

            screen = self._main_screen()
            if screen is None:
                return
            tree = screen.query_one(ProjectTree)
            node = tree.find_project_node(project.id)
            if node is not None:
                node.expand()
                tree.select_node(node)
        return callback

    def _open_domain(self, domain: str):
        def callback() -> None:
            webbrowser.open(f"https://{domain}")
        return callback
