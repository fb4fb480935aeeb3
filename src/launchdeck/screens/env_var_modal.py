"""Modal for adding or editing a single environment variable."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Static, Button, Input, Select, TextArea

from rich.markup import escape

TARGETS = [
    ("All environments", "all"),
    ("Production", "production"),
    ("Preview", "preview"),
    ("Development", "development"),
]


class EnvVarModal(ModalScreen[tuple[str, str, str] | None]):
    """Collects (key, value, target). Editing locks the key."""

    DEFAULT_CSS = """
    EnvVarModal {
        align: center middle;
    }
    #env-var-dialog {
        width: 80;
        height: auto;
        max-height: 30;
        border: thick $background 80%;
        background: $surface;
        padding: 1 2;
    }
    #env-var-dialog Static {
        margin-bottom: 1;
    }
    #env-key-input, #env-target {
        width: 100%;
        margin-bottom: 1;
    }
    #env-value-input {
        width: 100%;
        height: 6;
        margin-bottom: 1;
    }
    #env-var-buttons {
        width: 100%;
        height: 3;
        align: center middle;
    }
    #env-var-buttons Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(self, key: str | None = None, value: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self._key = key
        self._value = value

    @property
    def editing(self) -> bool:
        return self._key is not None

    def compose(self) -> ComposeResult:
        with Vertical(id="env-var-dialog"):
            if self.editing:
                yield Static(f"[bold]Edit {escape(self._key)}[/bold]")
            else:
                yield Static("[bold]Add Environment Variable[/bold]")
            yield Static("Key:")
            yield Input(
                value=self._key or "",
                placeholder="API_KEY",
                disabled=self.editing,
                id="env-key-input",
            )
            yield Static("Value:")
            yield TextArea(self._value, id="env-value-input")
            if not self.editing:
                yield Select(TARGETS, value="all", allow_blank=False, id="env-target")
            with Horizontal(id="env-var-buttons"):
                yield Button("Save" if self.editing else "Add", variant="primary", id="env-var-ok")
                yield Button("Cancel", variant="default", id="env-var-cancel")

    def on_mount(self) -> None:
        if self.editing:
            self.query_one("#env-value-input", TextArea).focus()
        else:
            self.query_one("#env-key-input", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "env-var-ok":
            self.dismiss(None)
            return
        key = self._key or self.query_one("#env-key-input", Input).value.strip()
        value = self.query_one("#env-value-input", TextArea).text
        if not key or not value:
            self.notify("Both key and value are required", severity="error")
            return
        target = "all"
        if not self.editing:
            target = str(self.query_one("#env-target", Select).value)
        self.dismiss((key, value, target))

    def action_cancel(self) -> None:
        self.dismiss(None)
