"""Lane column widget."""

from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task, TaskStatus
from .task_card import TaskCard


def _task_css_id(task_id: str) -> str:
    """Generate a CSS-safe widget ID from a server task id.

    Hex of the UTF-8 bytes, so distinct task ids never share a widget ID.
    """
    return f"task-{task_id.encode().hex()}"


class TaskListScroll(VerticalScroll):
    """Scroll container that lets navigation keys bubble up to the App."""

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()


class LaneColumn(Widget):
    """One lane of the board."""

    DEFAULT_CSS = """
    LaneColumn {
        width: 1fr;
        height: 100%;
        border: solid $primary-darken-2;
        padding: 0 1;
    }

    LaneColumn .column-header {
        text-style: bold;
        padding-bottom: 1;
    }

    LaneColumn .empty-lane {
        color: $text-muted;
    }
    """

    def __init__(self, lane: TaskStatus, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.lane = lane
        self._tasks: list[Task] = []

    def compose(self) -> ComposeResult:
        yield Static(self._header_text, classes="column-header", id=f"header-{self.lane.value}")
        yield TaskListScroll(id=f"content-{self.lane.value}")

    @property
    def _header_text(self) -> str:
        return f"{self.lane.label} [dim]({len(self._tasks)})[/]"

    def set_tasks(self, tasks: list[Task]) -> None:
        """Replace the tasks shown in this lane."""
        self._tasks = list(tasks)
        self.call_after_refresh(self._refresh_tasks)

    async def _refresh_tasks(self) -> None:
        content = self.query_one(f"#content-{self.lane.value}", TaskListScroll)
        await content.remove_children()

        if not self._tasks:
            await content.mount(Static("No tasks", classes="empty-lane"))
        else:
            await content.mount_all(
                TaskCard(task, id=_task_css_id(task.id)) for task in self._tasks
            )

        self.query_one(f"#header-{self.lane.value}", Static).update(self._header_text)

    @property
    def tasks(self) -> list[Task]:
        return self._tasks

    @property
    def task_count(self) -> int:
        return len(self._tasks)

    def get_task(self, index: int) -> Task | None:
        """Get task at index."""
        if 0 <= index < len(self._tasks):
            return self._tasks[index]
        return None

    def focus_task(self, index: int) -> bool:
        """Focus the card at ``index``. Returns False if there is none."""
        task = self.get_task(index)
        if task is None:
            return False
        cards = self.query(f"#{_task_css_id(task.id)}")
        if not cards:
            return False
        card = cards.first(TaskCard)
        card.focus()
        card.scroll_visible()
        return True
