"""taskroom TUI Application."""

from __future__ import annotations

import logging
from collections.abc import Awaitable

from textual.app import App
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Button, Input

from .config import Settings
from .errors import (
    AuthFailure,
    ConflictFailure,
    CreateFailure,
    TaskroomError,
    ValidationFailure,
)
from .models import Task
from .services.factory import Services, build_services
from .ui.gestures import lane_move, row_move
from .ui.screens import BoardScreen, LoginScreen
from .ui.widgets import ConfirmDeleteModal, EditTitleModal, RoomBar

logger = logging.getLogger(__name__)


class TaskroomApp(App):
    """taskroom - Terminal kanban board with shared rooms."""

    TITLE = "taskroom"

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Quit", show=True),
        Binding("r", "refresh", "Refresh", show=True),
        # Navigation - vim style
        Binding("h", "nav_left", "← Lane", show=False),
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("l", "nav_right", "→ Lane", show=False),
        # Navigation - arrow keys
        Binding("left", "nav_left", "← Lane", show=False),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        Binding("right", "nav_right", "→ Lane", show=False),
        # Task actions
        Binding("n", "new_task", "New", show=True),
        Binding("e", "edit_task", "Edit", show=True),
        Binding("d", "delete_task", "Delete", show=True),
        # Keyboard drag and drop
        Binding("H", "move_task_left", "Move ←", show=False),
        Binding("L", "move_task_right", "Move →", show=False),
        Binding("shift+left", "move_task_left", "Move ←", show=False),
        Binding("shift+right", "move_task_right", "Move →", show=False),
        Binding("K", "move_task_up", "Move ↑", show=False),
        Binding("J", "move_task_down", "Move ↓", show=False),
        Binding("shift+up", "move_task_up", "Move ↑", show=False),
        Binding("shift+down", "move_task_down", "Move ↓", show=False),
        # Rooms and session
        Binding("c", "create_room", "Create room", show=True),
        Binding("x", "dismiss_error", "Dismiss", show=False),
        Binding("o", "logout", "Logout", show=True),
        Binding("escape", "escape", "Back", show=False),
    ]

    def __init__(self, settings: Settings | None = None, services: Services | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.services = services or build_services(self.settings)
        # Forced logout from any gated call lands on the login screen
        self.services.gate.on_unauthorized = self.show_login

    def on_mount(self) -> None:
        if self.services.session.is_active:
            self.push_screen(BoardScreen())
        else:
            self.push_screen(self._login_screen())

    async def on_unmount(self) -> None:
        await self.services.aclose()

    # Screen switching

    def show_login(self) -> None:
        """Replace whatever is showing with the login screen."""
        while isinstance(self.screen, ModalScreen):
            self.pop_screen()
        if isinstance(self.screen, LoginScreen):
            return
        logger.info("Session ended, showing login")
        self.switch_screen(self._login_screen())

    def open_board(self) -> None:
        """Show the board. It loads tasks once mounted."""
        self.switch_screen(BoardScreen())

    def _login_screen(self) -> LoginScreen:
        google_url = self.services.auth.google_login_url(self.settings.oauth_redirect_uri)
        return LoginScreen(google_url=google_url)

    def _board_screen(self) -> BoardScreen | None:
        screen = self.screen
        return screen if isinstance(screen, BoardScreen) else None

    # Error reporting

    def report_error(self, message: str) -> None:
        """Show a dismissible error on the board, or a notification elsewhere."""
        screen = self._board_screen()
        if screen is not None:
            screen.show_error(message)
        else:
            self.notify(message, severity="error")

    async def _attempt(self, operation: Awaitable[object]) -> bool:
        """Await a core operation, reporting any failure.

        Returns:
            True if the operation succeeded
        """
        try:
            await operation
        except AuthFailure as e:
            # The gate has already cleared the session and shown login
            self.notify(e.message, severity="warning")
            return False
        except TaskroomError as e:
            self.report_error(e.message)
            return False
        return True

    # Board operations

    async def _refresh(self) -> None:
        screen = self._board_screen()
        if screen is not None:
            screen.dismiss_error()
            screen.set_loading(True)
        try:
            await self._attempt(self.services.board.refresh())
        finally:
            screen = self._board_screen()
            if screen is not None:
                screen.set_loading(False)

    async def _add_task(self, title: str) -> None:
        if await self._attempt(self.services.board.add_task(title)):
            self.notify("Task added", timeout=2)

    async def _edit_task(self, task: Task, new_title: str | None) -> None:
        await self._attempt(self.services.board.edit_task(task, new_title))

    async def _delete_task(self, task_id: str) -> None:
        if await self._attempt(self.services.board.delete_task(task_id)):
            self.notify("Task deleted", timeout=2)

    async def _drag(self, lane_delta: int, row_delta: int) -> None:
        """Build a gesture from the focused task and hand it to the reconciler."""
        screen = self._board_screen()
        if screen is None:
            return

        board = self.services.board.board
        if lane_delta:
            gesture = lane_move(board, screen.current_lane, screen.current_task_index, lane_delta)
        else:
            gesture = row_move(board, screen.current_lane, screen.current_task_index, row_delta)
        if gesture is None:
            return

        screen.follow_task(gesture.task_id)
        try:
            outcome = await self.services.drag.on_drag_end(gesture)
        except AuthFailure as e:
            self.notify(e.message, severity="warning")
            return

        if outcome.error:
            self.report_error(outcome.error)

    # Room operations

    async def _create_room(self) -> None:
        try:
            code = await self.services.rooms.create_room()
        except AuthFailure as e:
            self.notify(e.message, severity="warning")
            return
        except CreateFailure:
            code = None

        screen = self._board_screen()
        if screen is None:
            return
        room_bar = screen.query_one(RoomBar)
        if code is None:
            room_bar.show_create_error(self.services.rooms.message)
        else:
            room_bar.show_created_code(code.code)

    async def _join_room(self, input_code: str) -> None:
        try:
            await self.services.rooms.join_room(input_code)
            ok = True
        except AuthFailure as e:
            self.notify(e.message, severity="warning")
            return
        except (ValidationFailure, ConflictFailure):
            ok = False

        screen = self._board_screen()
        if screen is not None:
            screen.query_one(RoomBar).show_join_message(self.services.rooms.message, ok)

    # Account operations

    async def _login(self, email: str, password: str) -> None:
        screen = self.screen
        try:
            await self.services.auth.login(email, password)
        except TaskroomError as e:
            if isinstance(screen, LoginScreen):
                screen.show_error(e.message)
            return
        self.notify("Login successful", timeout=2)
        self.open_board()

    async def _register(self, name: str, email: str, password: str) -> None:
        screen = self.screen
        if not isinstance(screen, LoginScreen):
            return
        try:
            await self.services.auth.register(name, email, password)
        except TaskroomError as e:
            screen.show_error(e.message)
            return
        screen.toggle_mode()
        self.notify("Signup successful! Please log in.", timeout=3)

    # Event handlers

    def on_input_submitted(self, event: Input.Submitted) -> None:
        input_id = event.input.id
        if input_id == "new-task-input":
            title = event.value
            event.input.value = ""
            self.run_worker(self._add_task(title), group="board")
        elif input_id == "room-code-input":
            self.run_worker(self._join_room(event.value), group="rooms")
        elif input_id in ("email-input", "password-input", "name-input"):
            self._submit_login_form()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "create-room":
            self.action_create_room()
        elif button_id == "join-room":
            screen = self._board_screen()
            if screen is not None:
                code = screen.query_one(RoomBar).code_input
                self.run_worker(self._join_room(code), group="rooms")
        elif button_id == "submit":
            self._submit_login_form()
        elif button_id == "toggle-mode":
            screen = self.screen
            if isinstance(screen, LoginScreen):
                screen.toggle_mode()

    def _submit_login_form(self) -> None:
        screen = self.screen
        if not isinstance(screen, LoginScreen):
            return
        name, email, password = screen.values()
        if screen.signup_mode:
            self.run_worker(self._register(name, email, password), group="auth")
        else:
            self.run_worker(self._login(email, password), group="auth")

    # Actions

    def action_refresh(self) -> None:
        if self._board_screen() is not None:
            self.run_worker(self._refresh(), group="board")

    def action_nav_left(self) -> None:
        screen = self._board_screen()
        if screen is not None:
            screen.navigate_column(-1)

    def action_nav_right(self) -> None:
        screen = self._board_screen()
        if screen is not None:
            screen.navigate_column(1)

    def action_nav_up(self) -> None:
        screen = self._board_screen()
        if screen is not None:
            screen.navigate_task(-1)

    def action_nav_down(self) -> None:
        screen = self._board_screen()
        if screen is not None:
            screen.navigate_task(1)

    def action_new_task(self) -> None:
        screen = self._board_screen()
        if screen is not None:
            screen.focus_new_task_input()

    def action_edit_task(self) -> None:
        screen = self._board_screen()
        if screen is None:
            return
        task = screen.get_current_task()
        if task is None:
            return

        def handle(new_title: str | None) -> None:
            self.run_worker(self._edit_task(task, new_title), group="board")

        self.push_screen(EditTitleModal(task.title), callback=handle)

    def action_delete_task(self) -> None:
        screen = self._board_screen()
        if screen is None:
            return
        task = screen.get_current_task()
        if task is None:
            return

        def handle(confirmed: bool | None) -> None:
            if confirmed:
                self.run_worker(self._delete_task(task.id), group="board")

        self.push_screen(ConfirmDeleteModal(task.title), callback=handle)

    def action_move_task_left(self) -> None:
        self.run_worker(self._drag(-1, 0), group="drag")

    def action_move_task_right(self) -> None:
        self.run_worker(self._drag(1, 0), group="drag")

    def action_move_task_up(self) -> None:
        self.run_worker(self._drag(0, -1), group="drag")

    def action_move_task_down(self) -> None:
        self.run_worker(self._drag(0, 1), group="drag")

    def action_create_room(self) -> None:
        if self._board_screen() is not None:
            self.run_worker(self._create_room(), group="rooms")

    def action_dismiss_error(self) -> None:
        screen = self._board_screen()
        if screen is not None:
            screen.dismiss_error()

    def action_logout(self) -> None:
        if self._board_screen() is None:
            return
        self.services.auth.logout()
        self.show_login()

    def action_escape(self) -> None:
        """Dismiss a modal, or leave a text input for the board."""
        screen = self.screen
        if isinstance(screen, ModalScreen):
            screen.dismiss()
            return
        if isinstance(screen, BoardScreen) and isinstance(self.focused, Input):
            self.set_focus(None)
            screen.navigate_task(0)


def run(settings: Settings | None = None) -> None:
    """Run the taskroom application."""
    app = TaskroomApp(settings)
    app.run()
