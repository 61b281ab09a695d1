"""Task domain model."""

from enum import Enum

from pydantic import BaseModel, field_validator, model_validator


class TaskStatus(str, Enum):
    """The three fixed lanes a task can be in."""

    TODO = "todo"
    IN_PROGRESS = "inprogress"
    DONE = "done"

    @property
    def label(self) -> str:
        """Lane heading for display."""
        return LANE_TITLES[self]


LANE_TITLES: dict[TaskStatus, str] = {
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.DONE: "Done",
}

# Display order, left to right
LANE_ORDER: tuple[TaskStatus, ...] = (
    TaskStatus.TODO,
    TaskStatus.IN_PROGRESS,
    TaskStatus.DONE,
)


class Task(BaseModel):
    """A task as returned by the backend."""

    id: str  # Server-assigned; numeric ids are stored as strings
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO

    model_config = {"frozen": True}

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        """Accept numeric ids from the wire."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Task title cannot be empty")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: object) -> object:
        return "" if v is None else v

    def with_status(self, status: TaskStatus) -> "Task":
        """Return a copy of this task in another lane."""
        return self.model_copy(update={"status": status})


class TaskUpdate(BaseModel):
    """Partial update for PUT /tasks/{id}."""

    title: str | None = None
    status: TaskStatus | None = None

    @model_validator(mode="after")
    def check_not_empty(self) -> "TaskUpdate":
        if self.title is None and self.status is None:
            raise ValueError("TaskUpdate needs a title or a status")
        if self.title is not None and not self.title.strip():
            raise ValueError("Task title cannot be empty")
        return self

    def to_payload(self) -> dict:
        """Request body with unset fields left out."""
        return self.model_dump(mode="json", exclude_none=True)
