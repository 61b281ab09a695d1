"""Service for board state management."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import DeleteFailure, UpdateFailure, ValidationFailure
from ..models import Board, Task, TaskStatus, TaskUpdate
from ..repositories import TaskRepositoryProtocol

logger = logging.getLogger(__name__)

BoardListener = Callable[[Board], None]


class BoardService:
    """Owns the current Board and keeps it in line with the backend.

    Reconciliation is a full refetch after every create, edit or delete:
    the board is rebuilt from ``list_tasks`` rather than patched.
    """

    def __init__(self, repository: TaskRepositoryProtocol) -> None:
        self.repository = repository
        self._board = Board()
        self._listeners: list[BoardListener] = []
        self._loading = 0

    @property
    def board(self) -> Board:
        return self._board

    @property
    def is_loading(self) -> bool:
        """True while a refresh is in flight."""
        return self._loading > 0

    def subscribe(self, listener: BoardListener) -> None:
        """Call ``listener`` with the new Board whenever it changes."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: BoardListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, board: Board) -> None:
        """Replace the current Board and notify listeners."""
        self._board = board
        for listener in self._listeners:
            listener(board)

    async def refresh(self) -> Board:
        """Reload every task from the backend and rebuild the board."""
        self._loading += 1
        try:
            tasks = await self.repository.list_tasks()
        finally:
            self._loading -= 1
        board = Board.load(tasks)
        logger.debug("Board refreshed: %d tasks", board.task_count)
        self.publish(board)
        return board

    async def add_task(
        self,
        title: str,
        description: str = "",
        status: TaskStatus = TaskStatus.TODO,
    ) -> Task:
        """Create a task, then refetch the board."""
        title = title.strip()
        if not title:
            raise ValidationFailure("Task title cannot be empty")

        task = await self.repository.create_task(title, description, status)
        await self.refresh()
        return task

    async def edit_task(self, task: Task, new_title: str | None) -> bool:
        """Rename a task, then refetch.

        A blank or unchanged title is ignored.

        Returns:
            True if an update was sent
        """
        if not new_title or not new_title.strip() or new_title == task.title:
            logger.debug("edit_task: nothing to change for %s", task.id)
            return False

        try:
            await self.repository.update_task(
                task.id, TaskUpdate(title=new_title, status=task.status)
            )
        except UpdateFailure as e:
            raise UpdateFailure("Failed to edit task.") from e
        await self.refresh()
        return True

    async def delete_task(self, task_id: str) -> None:
        """Delete a task, then refetch.

        A task the backend no longer has counts as deleted.
        """
        try:
            await self.repository.delete_task(task_id)
        except DeleteFailure as e:
            if not e.already_gone:
                raise
            logger.info("Task already deleted: %s", task_id)
        await self.refresh()
