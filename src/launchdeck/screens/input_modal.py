"""Single-line prompt used for .env file paths and member usernames."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Static, Button, Input

# Returns an error message, or None when the value is acceptable.
Validator = Callable[[str], "str | None"]


def existing_file(value: str) -> str | None:
    """Validator for paths typed into the import prompt."""
    path = Path(value).expanduser()
    if not path.exists():
        return f"No such file: {value}"
    if not path.is_file():
        return f"Not a file: {value}"
    return None


class InputModal(ModalScreen[str | None]):
    """Collects one trimmed line of text; blank input counts as cancel.

    When ``validator`` rejects the value, its message is shown under the
    input and the modal stays open.
    """

    DEFAULT_CSS = """
    InputModal {
        align: center middle;
    }
    #input-dialog {
        width: 70;
        height: auto;
        max-height: 16;
        border: thick $background 80%;
        background: $surface;
        padding: 1 2;
    }
    #input-title {
        width: 100%;
        margin-bottom: 1;
    }
    #modal-input {
        width: 100%;
    }
    #input-error {
        width: 100%;
        height: 1;
        color: $error;
        margin-bottom: 1;
    }
    #input-buttons {
        width: 100%;
        height: 3;
        align: center middle;
    }
    #input-buttons Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(
        self,
        title: str,
        placeholder: str = "",
        value: str = "",
        *,
        validator: Validator | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.title_text = title
        self.placeholder = placeholder
        self.initial_value = value
        self.validator = validator

    def compose(self) -> ComposeResult:
        with Vertical(id="input-dialog"):
            yield Static(f"[bold]{self.title_text}[/bold]", id="input-title")
            yield Input(value=self.initial_value, placeholder=self.placeholder, id="modal-input")
            yield Static("", id="input-error", markup=False)
            with Horizontal(id="input-buttons"):
                yield Button("OK", variant="primary", id="input-ok")
                yield Button("Cancel", variant="default", id="input-cancel")

    def on_mount(self) -> None:
        self.query_one("#modal-input", Input).focus()

    def _submit(self, value: str) -> None:
        value = value.strip()
        if not value:
            self.dismiss(None)
            return
        error = self.validator(value) if self.validator else None
        if error:
            self.query_one("#input-error", Static).update(error)
            return
        self.dismiss(value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "input-ok":
            self._submit(self.query_one("#modal-input", Input).value)
        else:
            self.dismiss(None)

    def on_input_changed(self, event: Input.Changed) -> None:
        self.query_one("#input-error", Static).update("")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)
