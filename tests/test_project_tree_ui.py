"""Textual pilot tests for the ProjectTree widget."""

from __future__ import annotations

import pytest

from textual.app import App, ComposeResult

from launchdeck.api.models import Deployment, Project
from launchdeck.widgets.project_tree import NodeType, ProjectTree


class TreeTestApp(App):
    """Minimal app host for testing the ProjectTree."""

    CSS = "Screen { layout: vertical; }"

    def compose(self) -> ComposeResult:
        yield ProjectTree(id="tree")


class TestProjectTreePopulation:
    @pytest.mark.asyncio
    async def test_empty_tree(self):
        app = TreeTestApp()
        async with app.run_test() as pilot:
            tree = app.query_one(ProjectTree)
            tree.populate_projects([])
            await pilot.pause()
            assert len(tree.root.children) == 0

    @pytest.mark.asyncio
    async def test_project_node(self, sample_project):
        app = TreeTestApp()
        async with app.run_test() as pilot:
            tree = app.query_one(ProjectTree)
            tree.populate_projects([sample_project])
            await pilot.pause()

            assert len(tree.root.children) == 1
            node = tree.root.children[0]
            assert node.data.node_type == NodeType.PROJECT_ROOT
            assert node.data.project_id == "7"
            assert node.data.domain == "shop-frontend.hyphen.it.com"
            assert "ready" in str(node.label)

    @pytest.mark.asyncio
    async def test_section_children(self, sample_project):
        app = TreeTestApp()
        async with app.run_test() as pilot:
            tree = app.query_one(ProjectTree)
            tree.populate_projects([sample_project])
            await pilot.pause()

            children = tree.root.children[0].children
            assert [c.data.node_type for c in children] == [
                NodeType.OVERVIEW,
                NodeType.DEPLOYMENTS,
                NodeType.ENVIRONMENT,
                NodeType.BUILD_SETTINGS,
                NodeType.MEMBERS,
            ]
            assert all(c.data.project_id == "7" for c in children)

    @pytest.mark.asyncio
    async def test_never_deployed_label(self):
        app = TreeTestApp()
        async with app.run_test() as pilot:
            tree = app.query_one(ProjectTree)
            tree.populate_projects([Project(id=1, name="fresh")])
            await pilot.pause()
            assert "new" in str(tree.root.children[0].label)

    @pytest.mark.asyncio
    async def test_repopulate_replaces(self, sample_project):
        app = TreeTestApp()
        async with app.run_test() as pilot:
            tree = app.query_one(ProjectTree)
            tree.populate_projects([sample_project])
            await pilot.pause()
            other = Project(
                id=9, name="api", last_deployment=Deployment(id=1, status="building")
            )
            tree.populate_projects([other])
            await pilot.pause()
            assert len(tree.root.children) == 1
            assert tree.root.children[0].data.project_id == "9"


class TestProjectTreeLookup:
    @pytest.mark.asyncio
    async def test_find_project_node(self, sample_project):
        app = TreeTestApp()
        async with app.run_test() as pilot:
            tree = app.query_one(ProjectTree)
            tree.populate_projects([sample_project, Project(id=2, name="other")])
            await pilot.pause()
            assert tree.find_project_node("2").data.label == "other"
            assert tree.find_project_node("404") is None


class TestVimKeys:
    @pytest.mark.asyncio
    async def test_cursor_parent_collapses(self, sample_project):
        app = TreeTestApp()
        async with app.run_test() as pilot:
            tree = app.query_one(ProjectTree)
            tree.enable_vim_keys()
            tree.populate_projects([sample_project])
            await pilot.pause()
            node = tree.root.children[0]
            node.expand()
            tree.move_cursor(node)
            await pilot.pause()
            tree.action_cursor_parent()
            await pilot.pause()
            assert not node.is_expanded
