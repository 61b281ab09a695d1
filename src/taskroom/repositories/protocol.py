"""Repository protocol for the remote task store."""

from typing import Protocol

from ..models import Task, TaskStatus, TaskUpdate


class TaskRepositoryProtocol(Protocol):
    """Interface for task storage backends.

    Implementations hold no cache: callers refresh or reconcile their
    own board state after each call. Every method is gated on the
    session and raises AuthFailure when it is missing or rejected.
    """

    async def list_tasks(self) -> list[Task]:
        """Fetch the caller's full task set.

        Raises:
            FetchFailure: The tasks could not be loaded.
        """
        ...

    async def create_task(
        self,
        title: str,
        description: str = "",
        status: TaskStatus = TaskStatus.TODO,
    ) -> Task:
        """Create a task and return it with its server-assigned id.

        Raises:
            ValidationFailure: Empty title (no request is sent).
            CreateFailure: The backend rejected the task.
        """
        ...

    async def update_task(self, task_id: str, update: TaskUpdate) -> Task | None:
        """Apply a partial update (title and/or status).

        Raises:
            UpdateFailure: The update did not go through.
        """
        ...

    async def delete_task(self, task_id: str) -> None:
        """Delete a task by ID.

        Raises:
            DeleteFailure: The backend refused, including for an id that
                is already gone (``already_gone`` is then True).
        """
        ...
