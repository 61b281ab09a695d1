"""Collaboration room bar: create a room or join one by code."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Button, Input, Static


class RoomBar(Widget):
    """Room controls shown above the board."""

    DEFAULT_CSS = """
    RoomBar {
        height: auto;
        padding: 0 1;
    }

    RoomBar Horizontal {
        height: auto;
    }

    RoomBar #room-code-input {
        width: 24;
    }

    RoomBar .room-status {
        width: 1fr;
        padding: 1 1 0 1;
    }

    RoomBar .room-status.-ok {
        color: $success;
    }

    RoomBar .room-status.-warning {
        color: $warning;
    }
    """

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Button("Create Room", id="create-room", variant="primary")
            yield Static("", id="created-code", classes="room-status")
            yield Input(placeholder="Enter Room Code", id="room-code-input")
            yield Button("Join", id="join-room", variant="primary")
            yield Static("", id="join-message", classes="room-status")

    def on_input_changed(self, event: Input.Changed) -> None:
        """Room codes are shown uppercase as they are typed."""
        if event.input.id == "room-code-input" and event.value != event.value.upper():
            event.input.value = event.value.upper()

    @property
    def code_input(self) -> str:
        return self.query_one("#room-code-input", Input).value

    def show_created_code(self, code: str) -> None:
        status = self.query_one("#created-code", Static)
        status.update(f"Share this code: [b]{escape(code)}[/]")
        status.set_class(True, "-ok")
        status.set_class(False, "-warning")

    def show_create_error(self, message: str) -> None:
        status = self.query_one("#created-code", Static)
        status.update(escape(message))
        status.set_class(False, "-ok")
        status.set_class(True, "-warning")

    def show_join_message(self, message: str, ok: bool) -> None:
        status = self.query_one("#join-message", Static)
        status.update(escape(message))
        status.set_class(ok, "-ok")
        status.set_class(not ok, "-warning")

    def set_busy(self, busy: bool) -> None:
        """Disable the controls while a request is in flight."""
        for button in self.query(Button):
            button.disabled = busy
