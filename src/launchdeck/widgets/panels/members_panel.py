"""Project members panel."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import DataTable, Static, Button
from textual import work

from rich.markup import escape

from launchdeck.api.endpoints.projects import ProjectsAPI
from launchdeck.widgets.project_tree import NodeData


class MembersPanel(Vertical):
    """Lists project members and allows inviting or removing them."""

    DEFAULT_CSS = """
    MembersPanel {
        height: 1fr;
    }
    MembersPanel .action-bar {
        height: 3;
        layout: horizontal;
        margin-bottom: 1;
    }
    MembersPanel .action-bar Button {
        margin: 0 1 0 0;
    }
    MembersPanel DataTable {
        height: 1fr;
    }
    """

    def __init__(self, node_data: NodeData, **kwargs) -> None:
        super().__init__(**kwargs)
        self.node_data = node_data

    def compose(self) -> ComposeResult:
        yield Static("[bold]Members[/bold]", classes="panel-title")
        with Vertical(classes="action-bar"):
            yield Button("Invite", id="btn-invite", variant="primary")
            yield Button("Refresh", id="btn-refresh", variant="default")
        yield DataTable(id="members-table", cursor_type="row")

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.add_columns("ID", "Username", "Role")
        self.load_data()

    @work(exclusive=True)
    async def load_data(self) -> None:
        table = self.query_one(DataTable)
        table.loading = True
        try:
            api = ProjectsAPI(self.app.api_client)
            members = await api.list_members(self.node_data.project_id)
            table.clear()
            for m in members:
                table.add_row(
                    str(m.id),
                    escape(m.username),
                    m.role or "",
                    key=str(m.id),
                )
        except Exception as e:
            self.notify(f"Error: {e}", severity="error", markup=False)
        finally:
            table.loading = False

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-refresh":
            self.load_data()
        elif event.button.id == "btn-invite":
            self._invite()

    @work
    async def _invite(self) -> None:
        from launchdeck.screens.input_modal import InputModal

        username = await self.app.push_screen_wait(
            InputModal("Invite Member", placeholder="github-username")
        )
        if username:
            try:
                api = ProjectsAPI(self.app.api_client)
                await api.invite_member(self.node_data.project_id, username)
            except Exception as e:
                self.notify(f"Invite failed: {e}", severity="error", markup=False)
                return
            self.notify(f"Invited {username}", markup=False)
            self.load_data()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        user_id = int(str(event.row_key.value))
        self._confirm_remove(user_id)

    @work
    async def _confirm_remove(self, user_id: int) -> None:
        from launchdeck.screens.confirm import ConfirmModal

        confirmed = await self.app.push_screen_wait(
            ConfirmModal(
                f"Remove member #{user_id} from this project?",
                "Remove",
                destructive=True,
            )
        )
        if confirmed:
            try:
                api = ProjectsAPI(self.app.api_client)
                await api.remove_member(self.node_data.project_id, user_id)
            except Exception as e:
                self.notify(f"Remove failed: {e}", severity="error", markup=False)
                return
            self.notify("Member removed")
            self.load_data()
