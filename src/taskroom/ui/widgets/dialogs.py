"""Modal dialogs for editing and deleting tasks."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

_DIALOG_CSS = """
{name} {{
    align: center middle;
}}

{name} > Vertical {{
    width: 60;
    height: auto;
    padding: 1 2;
    background: $surface;
    border: solid $primary;
}}

{name} Label {{
    width: 100%;
    margin-bottom: 1;
}}

{name} .buttons {{
    width: 100%;
    height: auto;
}}

{name} Button {{
    margin: 0 1;
}}
"""


class EditTitleModal(ModalScreen[str | None]):
    """Asks for a new task title. Dismisses with the text, or None."""

    DEFAULT_CSS = _DIALOG_CSS.format(name="EditTitleModal")

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, current_title: str) -> None:
        super().__init__()
        self.current_title = current_title

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("Edit task title:")
            yield Input(value=self.current_title, id="title-input")
            with Center(classes="buttons"):
                yield Button("Save", id="save", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#title-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save":
            self.dismiss(self.query_one("#title-input", Input).value)
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class ConfirmDeleteModal(ModalScreen[bool]):
    """Confirms deletion of a task."""

    DEFAULT_CSS = _DIALOG_CSS.format(name="ConfirmDeleteModal")

    BINDINGS = [
        Binding("y", "confirm", "Yes"),
        Binding("n", "cancel", "No"),
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, task_title: str) -> None:
        super().__init__()
        self.task_title = task_title

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(f"Delete '{escape(self.task_title)}'?")
            with Center(classes="buttons"):
                yield Button("Delete", id="yes", variant="error")
                yield Button("Keep", id="no", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "yes")

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
