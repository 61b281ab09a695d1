"""Task repository backed by the REST API."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..api import ApiClient, ApiError
from ..errors import CreateFailure, DeleteFailure, FetchFailure, UpdateFailure, ValidationFailure
from ..models import Task, TaskStatus, TaskUpdate
from ..session import SessionGate

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(list[Task])


class TaskRepository:
    """Typed facade over /tasks. Every call passes through the session gate."""

    def __init__(self, client: ApiClient, gate: SessionGate) -> None:
        self._client = client
        self._gate = gate

    async def list_tasks(self) -> list[Task]:
        async def op(token: str) -> Any:
            return await self._client.request("GET", "/tasks", token=token)

        try:
            data = await self._gate.call(op)
            tasks = _TASK_LIST.validate_python(data or [])
        except ApiError as e:
            raise FetchFailure() from e
        except ValidationError as e:
            logger.error("Malformed task list from backend: %s", e)
            raise FetchFailure() from e

        logger.debug("Fetched %d tasks", len(tasks))
        return tasks

    async def create_task(
        self,
        title: str,
        description: str = "",
        status: TaskStatus = TaskStatus.TODO,
    ) -> Task:
        if not title.strip():
            raise ValidationFailure("Task title cannot be empty")

        payload = {"title": title, "description": description, "status": status.value}

        async def op(token: str) -> Any:
            return await self._client.request("POST", "/tasks", token=token, json=payload)

        try:
            data = await self._gate.call(op)
            task = Task.model_validate(data)
        except ApiError as e:
            raise CreateFailure() from e
        except ValidationError as e:
            logger.error("Malformed task from backend: %s", e)
            raise CreateFailure() from e

        logger.info("Task created: %s (status=%s)", task.id, task.status.value)
        return task

    async def update_task(self, task_id: str, update: TaskUpdate) -> Task | None:
        payload = update.to_payload()

        async def op(token: str) -> Any:
            return await self._client.request(
                "PUT", f"/tasks/{task_id}", token=token, json=payload
            )

        try:
            data = await self._gate.call(op)
        except ApiError as e:
            raise UpdateFailure() from e

        logger.info("Task updated: %s %s", task_id, payload)
        if not data:
            return None
        try:
            return Task.model_validate(data)
        except ValidationError:
            # The update went through; the body is informational only
            logger.debug("Ignoring unparseable update response for %s", task_id)
            return None

    async def delete_task(self, task_id: str) -> None:
        async def op(token: str) -> Any:
            return await self._client.request("DELETE", f"/tasks/{task_id}", token=token)

        try:
            await self._gate.call(op)
        except ApiError as e:
            raise DeleteFailure(status_code=e.status_code) from e

        logger.info("Task deleted: %s", task_id)
