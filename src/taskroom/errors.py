"""Error taxonomy for board, session and room operations.

Every failure that reaches the view is one of these. The message is
human-readable and safe to show in a notification.
"""

from __future__ import annotations


class TaskroomError(Exception):
    """Base exception for all user-facing failures."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthFailure(TaskroomError):
    """No session, or the backend rejected the token. Always forces logout."""

    default_message = "Your session has expired. Please log in again."


class ValidationFailure(TaskroomError):
    """Input rejected locally before any network call."""

    default_message = "Invalid input"


class FetchFailure(TaskroomError):
    """Loading the task list failed."""

    default_message = "Failed to load tasks. Please refresh the page."


class CreateFailure(TaskroomError):
    """Creating a task or room failed."""

    default_message = "Failed to add task. Please try again."


class UpdateFailure(TaskroomError):
    """Updating a task failed."""

    default_message = "Failed to update task."


class DeleteFailure(TaskroomError):
    """Deleting a task failed."""

    default_message = "Failed to delete task."

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def already_gone(self) -> bool:
        """The backend reported the task as not found."""
        return self.status_code == 404


class ConflictFailure(TaskroomError):
    """The backend rejected a room join (e.g. unknown code)."""

    default_message = "Failed to join room"
