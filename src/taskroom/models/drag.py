"""Drag gesture and reconciliation result models."""

from dataclasses import dataclass
from enum import Enum

from .task import Task, TaskStatus


class ReconcileState(str, Enum):
    """Where the drag engine is in handling one gesture."""

    IDLE = "idle"
    RECONCILING = "reconciling"


class DragResult(str, Enum):
    """What a finished drag gesture did."""

    DROPPED_OUTSIDE = "dropped_outside"  # No destination, nothing changed
    UNCHANGED = "unchanged"  # Dropped back where it started
    REORDERED = "reordered"  # Same lane, local only
    MOVED = "moved"  # Other lane, backend confirmed
    MOVE_FAILED = "move_failed"  # Other lane, backend update failed


@dataclass(frozen=True)
class DropLocation:
    """A position on the board: lane plus index within it."""

    lane: TaskStatus
    index: int


@dataclass(frozen=True)
class DragGesture:
    """Source and destination of a completed drag."""

    task_id: str
    source: DropLocation
    destination: DropLocation | None  # None when dropped outside every lane


@dataclass
class DragOutcome:
    """Result of reconciling one drag gesture."""

    result: DragResult
    task: Task | None = None  # The moved task, if any
    error: str | None = None  # Message for the view on failure
    reverted: bool = False  # Local move undone after a failed update

    @property
    def diverged(self) -> bool:
        """Local board and backend disagree until the next refresh."""
        return self.result == DragResult.MOVE_FAILED and not self.reverted
