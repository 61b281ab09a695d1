"""Tests for BoardService."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from taskroom.errors import DeleteFailure, FetchFailure, UpdateFailure, ValidationFailure
from taskroom.models import Board, Task, TaskStatus, TaskUpdate
from taskroom.services import BoardService


def make_task(task_id: str, status: TaskStatus = TaskStatus.TODO, title: str | None = None) -> Task:
    """Helper to build a task."""
    return Task(id=task_id, title=title or f"Task {task_id}", status=status)


@pytest.fixture
def repo() -> AsyncMock:
    """Repository mock whose list_tasks returns two tasks."""
    repo = AsyncMock()
    repo.list_tasks.return_value = [
        make_task("1"),
        make_task("2", TaskStatus.DONE),
    ]
    return repo


@pytest.fixture
def service(repo: AsyncMock) -> BoardService:
    return BoardService(repo)


class TestBoardServiceRefresh:
    """Tests for loading the board."""

    def test_starts_empty(self, service: BoardService):
        assert service.board.task_count == 0
        assert not service.is_loading

    @pytest.mark.asyncio
    async def test_refresh_groups_tasks(self, service: BoardService):
        board = await service.refresh()
        assert board is service.board
        assert [t.id for t in board.lane(TaskStatus.TODO).items] == ["1"]
        assert [t.id for t in board.lane(TaskStatus.DONE).items] == ["2"]

    @pytest.mark.asyncio
    async def test_refresh_notifies_listeners(self, service: BoardService):
        listener = MagicMock()
        service.subscribe(listener)

        board = await service.refresh()

        listener.assert_called_once_with(board)

    @pytest.mark.asyncio
    async def test_unsubscribe(self, service: BoardService):
        listener = MagicMock()
        service.subscribe(listener)
        service.unsubscribe(listener)

        await service.refresh()

        listener.assert_not_called()

    @pytest.mark.asyncio
    async def test_loading_while_in_flight(self, service: BoardService, repo: AsyncMock):
        seen = []

        async def list_tasks():
            seen.append(service.is_loading)
            return []

        repo.list_tasks.side_effect = list_tasks
        await service.refresh()

        assert seen == [True]
        assert not service.is_loading

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_board(self, service: BoardService, repo: AsyncMock):
        await service.refresh()
        before = service.board
        repo.list_tasks.side_effect = FetchFailure()

        with pytest.raises(FetchFailure):
            await service.refresh()

        assert service.board is before
        assert not service.is_loading

    def test_publish_replaces_board(self, service: BoardService):
        board = Board.load([make_task("x")])
        service.publish(board)
        assert service.board is board


class TestBoardServiceAddTask:
    """Tests for creating tasks."""

    @pytest.mark.asyncio
    async def test_add_task_then_refetch(self, service: BoardService, repo: AsyncMock):
        repo.create_task.return_value = make_task("3", title="New")

        task = await service.add_task("  New  ")

        assert task.id == "3"
        repo.create_task.assert_awaited_once_with("New", "", TaskStatus.TODO)
        repo.list_tasks.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_blank_title(self, service: BoardService, repo: AsyncMock):
        with pytest.raises(ValidationFailure):
            await service.add_task("   ")
        repo.create_task.assert_not_called()
        repo.list_tasks.assert_not_called()


class TestBoardServiceEditTask:
    """Tests for renaming tasks."""

    @pytest.mark.asyncio
    async def test_edit_sends_title_and_status(self, service: BoardService, repo: AsyncMock):
        task = make_task("2", TaskStatus.DONE, title="Old")

        assert await service.edit_task(task, "New") is True

        repo.update_task.assert_awaited_once_with(
            "2", TaskUpdate(title="New", status=TaskStatus.DONE)
        )
        repo.list_tasks.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("new_title", [None, "", "   ", "Old"])
    async def test_nothing_to_change(self, service: BoardService, repo: AsyncMock, new_title):
        task = make_task("2", title="Old")

        assert await service.edit_task(task, new_title) is False

        repo.update_task.assert_not_called()
        repo.list_tasks.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_failure_skips_refetch(self, service: BoardService, repo: AsyncMock):
        repo.update_task.side_effect = UpdateFailure()
        with pytest.raises(UpdateFailure) as exc_info:
            await service.edit_task(make_task("2", title="Old"), "New")
        assert exc_info.value.message == "Failed to edit task."
        repo.list_tasks.assert_not_called()


class TestBoardServiceDeleteTask:
    """Tests for deleting tasks."""

    @pytest.mark.asyncio
    async def test_delete_then_refetch(self, service: BoardService, repo: AsyncMock):
        await service.delete_task("1")
        repo.delete_task.assert_awaited_once_with("1")
        repo.list_tasks.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_already_deleted_counts_as_success(self, service: BoardService, repo: AsyncMock):
        repo.delete_task.side_effect = DeleteFailure(status_code=404)
        await service.delete_task("1")
        repo.list_tasks.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_failure(self, service: BoardService, repo: AsyncMock):
        repo.delete_task.side_effect = DeleteFailure(status_code=500)
        with pytest.raises(DeleteFailure):
            await service.delete_task("1")
        repo.list_tasks.assert_not_called()
