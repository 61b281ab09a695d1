"""Task card widget."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task


class TaskCard(Widget, can_focus=True):
    """A task card displayed in a lane."""

    DEFAULT_CSS = """
    TaskCard {
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        border: round $panel;
    }

    TaskCard:focus {
        border: round $accent;
    }

    TaskCard .task-description {
        color: $text-muted;
    }
    """

    def __init__(self, task_data: Task, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data

    @property
    def task(self) -> Task:  # pyrefly: ignore[bad-override]
        """Get the task for this card."""
        return self._task_data

    def compose(self) -> ComposeResult:
        yield Static(escape(_truncate(self._task_data.title, 40)), classes="task-title")
        preview = _first_line(self._task_data.description)
        if preview:
            yield Static(escape(_truncate(preview, 50)), classes="task-description")


def _truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + "…"


def _first_line(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""
