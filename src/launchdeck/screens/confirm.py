"""Yes/no confirmation modal for deploys and destructive project actions."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Static, Button


class ConfirmModal(ModalScreen[bool]):
    """Asks before a deploy, delete or removal.

    ``destructive`` paints the confirm button red and puts focus on the
    cancel button, so a stray Enter never deletes anything.
    """

    DEFAULT_CSS = """
    ConfirmModal {
        align: center middle;
    }
    #confirm-dialog {
        width: 64;
        height: auto;
        max-height: 16;
        border: thick $background 80%;
        background: $surface;
        padding: 1 2;
    }
    ConfirmModal.destructive #confirm-dialog {
        border: thick $error 60%;
    }
    #confirm-message {
        width: 100%;
    }
    #confirm-detail {
        width: 100%;
        color: $text-muted;
    }
    #confirm-buttons {
        width: 100%;
        height: 3;
        margin-top: 1;
        align: center middle;
    }
    #confirm-buttons Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        ("y", "confirm", "Yes"),
        ("n", "cancel", "No"),
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(
        self,
        message: str,
        confirm_label: str = "Yes",
        *,
        detail: str = "",
        destructive: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.message = message
        self.confirm_label = confirm_label
        self.detail = detail
        self.destructive = destructive
        if destructive:
            self.add_class("destructive")

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-dialog"):
            yield Static(self.message, id="confirm-message")
            if self.detail:
                yield Static(self.detail, id="confirm-detail")
            with Horizontal(id="confirm-buttons"):
                yield Button(
                    self.confirm_label,
                    variant="error" if self.destructive else "primary",
                    id="confirm-yes",
                )
                yield Button("Cancel", variant="default", id="confirm-no")

    def on_mount(self) -> None:
        focus_id = "#confirm-no" if self.destructive else "#confirm-yes"
        self.query_one(focus_id, Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "confirm-yes")

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
