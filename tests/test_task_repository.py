"""Tests for TaskRepository against a fake backend."""

import pytest

from taskroom.errors import (
    AuthFailure,
    CreateFailure,
    DeleteFailure,
    FetchFailure,
    UpdateFailure,
    ValidationFailure,
)
from taskroom.models import TaskStatus, TaskUpdate
from taskroom.repositories import TaskRepository
from taskroom.session import Session, SessionGate


def task_json(task_id: str, status: str = "todo", title: str | None = None) -> dict:
    """Helper to build a task as the backend sends it."""
    return {"id": task_id, "title": title or f"Task {task_id}", "description": "", "status": status}


@pytest.fixture
def repo(client, gate) -> TaskRepository:
    return TaskRepository(client, gate)


class TestListTasks:
    """Tests for list_tasks."""

    @pytest.mark.asyncio
    async def test_parses_tasks(self, repo, backend):
        backend.on("GET", "/tasks", json=[task_json("1"), task_json("2", "done")])

        tasks = await repo.list_tasks()

        assert [t.id for t in tasks] == ["1", "2"]
        assert tasks[1].status == TaskStatus.DONE
        assert backend.requests[0].headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_empty_list(self, repo, backend):
        backend.on("GET", "/tasks", json=[])
        assert await repo.list_tasks() == []

    @pytest.mark.asyncio
    async def test_server_error(self, repo, backend):
        backend.on("GET", "/tasks", status=500)
        with pytest.raises(FetchFailure) as exc_info:
            await repo.list_tasks()
        assert exc_info.value.message == "Failed to load tasks. Please refresh the page."

    @pytest.mark.asyncio
    async def test_malformed_task(self, repo, backend):
        backend.on("GET", "/tasks", json=[{"id": "1", "title": "x", "status": "archived"}])
        with pytest.raises(FetchFailure):
            await repo.list_tasks()

    @pytest.mark.asyncio
    async def test_unauthorized(self, repo, backend, session, on_unauthorized):
        backend.on("GET", "/tasks", status=401)

        with pytest.raises(AuthFailure):
            await repo.list_tasks()

        assert not session.is_active
        on_unauthorized.assert_called_once()
        assert len(backend.requests) == 1

    @pytest.mark.asyncio
    async def test_no_session_sends_nothing(self, client, backend):
        repo = TaskRepository(client, SessionGate(Session()))
        with pytest.raises(AuthFailure):
            await repo.list_tasks()
        assert backend.requests == []


class TestCreateTask:
    """Tests for create_task."""

    @pytest.mark.asyncio
    async def test_payload(self, repo, backend):
        backend.on("POST", "/tasks", json=task_json("9", title="Buy milk"))

        task = await repo.create_task("Buy milk")

        assert task.id == "9"
        assert backend.body() == {"title": "Buy milk", "description": "", "status": "todo"}

    @pytest.mark.asyncio
    async def test_payload_with_status(self, repo, backend):
        backend.on("POST", "/tasks", json=task_json("9", "done"))
        await repo.create_task("Ship", "notes", TaskStatus.DONE)
        assert backend.body() == {"title": "Ship", "description": "notes", "status": "done"}

    @pytest.mark.asyncio
    async def test_blank_title_sends_nothing(self, repo, backend):
        with pytest.raises(ValidationFailure):
            await repo.create_task("   ")
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_server_error(self, repo, backend):
        backend.on("POST", "/tasks", status=500)
        with pytest.raises(CreateFailure) as exc_info:
            await repo.create_task("Buy milk")
        assert exc_info.value.message == "Failed to add task. Please try again."


class TestUpdateTask:
    """Tests for update_task."""

    @pytest.mark.asyncio
    async def test_status_payload(self, repo, backend):
        backend.on("PUT", "/tasks/3", json=task_json("3", "done"))

        task = await repo.update_task("3", TaskUpdate(status=TaskStatus.DONE))

        assert backend.body() == {"status": "done"}
        assert task is not None
        assert task.status == TaskStatus.DONE

    @pytest.mark.asyncio
    async def test_title_payload(self, repo, backend):
        backend.on("PUT", "/tasks/3", json=task_json("3", title="New"))
        await repo.update_task("3", TaskUpdate(title="New", status=TaskStatus.TODO))
        assert backend.body() == {"title": "New", "status": "todo"}

    @pytest.mark.asyncio
    async def test_empty_response(self, repo, backend):
        backend.on("PUT", "/tasks/3", status=204)
        assert await repo.update_task("3", TaskUpdate(status=TaskStatus.DONE)) is None

    @pytest.mark.asyncio
    async def test_informational_response(self, repo, backend):
        backend.on("PUT", "/tasks/3", json={"message": "Task updated"})
        assert await repo.update_task("3", TaskUpdate(status=TaskStatus.DONE)) is None

    @pytest.mark.asyncio
    async def test_server_error(self, repo, backend):
        backend.on("PUT", "/tasks/3", status=500)
        with pytest.raises(UpdateFailure):
            await repo.update_task("3", TaskUpdate(status=TaskStatus.DONE))


class TestDeleteTask:
    """Tests for delete_task."""

    @pytest.mark.asyncio
    async def test_delete_then_list(self, repo, backend):
        backend.on("DELETE", "/tasks/1", json={"message": "Task deleted"})
        backend.on("GET", "/tasks", json=[task_json("2")])

        await repo.delete_task("1")
        tasks = await repo.list_tasks()

        assert backend.paths() == ["DELETE /tasks/1", "GET /tasks"]
        assert [t.id for t in tasks] == ["2"]

    @pytest.mark.asyncio
    async def test_not_found(self, repo, backend):
        backend.on("DELETE", "/tasks/1", status=404)
        with pytest.raises(DeleteFailure) as exc_info:
            await repo.delete_task("1")
        assert exc_info.value.already_gone

    @pytest.mark.asyncio
    async def test_server_error(self, repo, backend):
        backend.on("DELETE", "/tasks/1", status=500)
        with pytest.raises(DeleteFailure) as exc_info:
            await repo.delete_task("1")
        assert not exc_info.value.already_gone
