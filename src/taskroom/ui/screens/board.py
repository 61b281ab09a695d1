"""Main kanban board screen."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, Static

from ...models import LANE_ORDER, Board, Task, TaskStatus
from ..widgets import LaneColumn, RoomBar


class BoardScreen(Screen):
    """Board with three lanes, a task input, room controls and an error banner."""

    DEFAULT_CSS = """
    BoardScreen #error-banner {
        display: none;
        background: $error;
        color: $text;
        padding: 0 1;
    }

    BoardScreen #error-banner.-visible {
        display: block;
    }

    BoardScreen #new-task-input {
        margin: 0 1;
    }

    BoardScreen #columns {
        height: 1fr;
    }
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_column = 0
        self._current_task = 0
        self._focus_task_id: str | None = None

    @property
    def board_service(self):
        return self.app.services.board  # pyrefly: ignore[missing-attribute]

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="error-banner")
        yield RoomBar()
        yield Input(placeholder="Enter a new task", id="new-task-input")
        with Horizontal(id="columns"):
            for lane in LANE_ORDER:
                yield LaneColumn(lane, id=f"column-{lane.value}")
        yield Footer()

    def on_mount(self) -> None:
        self.board_service.subscribe(self.render_board)
        self.render_board(self.board_service.board)
        self.app.action_refresh()  # pyrefly: ignore[missing-attribute]

    def on_unmount(self) -> None:
        self.board_service.unsubscribe(self.render_board)

    def render_board(self, board: Board) -> None:
        """Show ``board``, keeping focus on the same task when possible."""
        focus_id = self._focus_task_id or self._current_task_id()
        for lane in board.ordered_lanes():
            self._column(lane.id).set_tasks(lane.items)

        location = board.find(focus_id) if focus_id else None
        if location is not None:
            self._current_column = LANE_ORDER.index(location[0])
            self._current_task = location[1]
        else:
            count = len(board.lane(self.current_lane))
            self._current_task = max(0, min(self._current_task, count - 1))
        self._focus_task_id = None
        # Columns rebuild their cards after a refresh, focus after that
        self.call_after_refresh(lambda: self.call_after_refresh(self._update_focus))

    def follow_task(self, task_id: str) -> None:
        """Keep focus on ``task_id`` through the next render."""
        self._focus_task_id = task_id

    def show_error(self, message: str) -> None:
        banner = self.query_one("#error-banner", Static)
        banner.update(f"{escape(message)}  [dim](x to dismiss)[/]")
        banner.add_class("-visible")

    def dismiss_error(self) -> None:
        banner = self.query_one("#error-banner", Static)
        banner.update("")
        banner.remove_class("-visible")

    def set_loading(self, loading: bool) -> None:
        """Grey out inputs while a refresh is in flight."""
        self.query_one("#new-task-input", Input).disabled = loading
        self.query_one(RoomBar).set_busy(loading)

    def focus_new_task_input(self) -> None:
        self.query_one("#new-task-input", Input).focus()

    # Navigation

    def navigate_column(self, delta: int) -> None:
        new_column = max(0, min(self._current_column + delta, len(LANE_ORDER) - 1))
        if new_column != self._current_column:
            self._current_column = new_column
            count = self._column(self.current_lane).task_count
            self._current_task = max(0, min(self._current_task, count - 1))
            self._update_focus()

    def navigate_task(self, delta: int) -> None:
        count = self._column(self.current_lane).task_count
        if count == 0:
            return
        self._current_task = max(0, min(self._current_task + delta, count - 1))
        self._update_focus()

    @property
    def current_lane(self) -> TaskStatus:
        return LANE_ORDER[self._current_column]

    @property
    def current_task_index(self) -> int:
        return self._current_task

    def get_current_task(self) -> Task | None:
        return self._column(self.current_lane).get_task(self._current_task)

    def _current_task_id(self) -> str | None:
        task = self.get_current_task()
        return task.id if task else None

    def _column(self, lane: TaskStatus) -> LaneColumn:
        return self.query_one(f"#column-{lane.value}", LaneColumn)

    def _update_focus(self) -> None:
        self._column(self.current_lane).focus_task(self._current_task)
