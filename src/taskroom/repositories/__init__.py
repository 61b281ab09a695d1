"""Repository layer for data access."""

from .protocol import TaskRepositoryProtocol
from .tasks import TaskRepository

__all__ = [
    "TaskRepository",
    "TaskRepositoryProtocol",
]
