"""Data models."""

from .board import Board, Lane
from .drag import DragGesture, DragOutcome, DragResult, DropLocation, ReconcileState
from .room import ErrorMessage, RoomCode, TokenResponse, normalize_room_code
from .task import LANE_ORDER, LANE_TITLES, Task, TaskStatus, TaskUpdate

__all__ = [
    "LANE_ORDER",
    "LANE_TITLES",
    "Board",
    "DragGesture",
    "DragOutcome",
    "DragResult",
    "DropLocation",
    "ErrorMessage",
    "Lane",
    "ReconcileState",
    "RoomCode",
    "Task",
    "TaskStatus",
    "TaskUpdate",
    "TokenResponse",
    "normalize_room_code",
]
