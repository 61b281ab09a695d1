"""Board state models."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, Field, model_validator

from .task import LANE_ORDER, Task, TaskStatus

logger = logging.getLogger(__name__)


class Lane(BaseModel):
    """One fixed column of the board and its tasks in display order."""

    id: TaskStatus
    items: list[Task] = Field(default_factory=list)

    @model_validator(mode="after")
    def _items_match_lane(self) -> Lane:
        _check_statuses(self.id, self.items)
        return self

    @property
    def title(self) -> str:
        return self.id.label

    def __len__(self) -> int:
        return len(self.items)


def _empty_lanes() -> dict[TaskStatus, Lane]:
    return {status: Lane(id=status) for status in LANE_ORDER}


class Board(BaseModel):
    """The three lanes the view renders.

    All transforms are pure: they return a new Board and leave the
    receiver (and the tasks in it) untouched.
    """

    lanes: dict[TaskStatus, Lane] = Field(default_factory=_empty_lanes)

    @model_validator(mode="after")
    def _check_lanes(self) -> Board:
        """Exactly the three lanes, each holding only its own status, no id twice."""
        missing = [status.value for status in LANE_ORDER if status not in self.lanes]
        if missing:
            raise ValueError(f"Board is missing lanes: {', '.join(missing)}")
        seen: set[str] = set()
        for status, lane in self.lanes.items():
            if lane.id != status:
                raise ValueError(f"Lane {lane.id.value} stored under {status.value}")
            _check_statuses(status, lane.items)
            for task in lane.items:
                if task.id in seen:
                    raise ValueError(f"Task {task.id} appears more than once on the board")
                seen.add(task.id)
        return self

    @classmethod
    def load(cls, tasks: Iterable[Task]) -> Board:
        """Create a Board from a full task list, grouping by status.

        Replaces any previous contents. A task id seen twice keeps its
        first occurrence.
        """
        lanes = _empty_lanes()
        seen: set[str] = set()
        for task in tasks:
            if task.id in seen:
                logger.warning("Duplicate task id in task list, skipping: %s", task.id)
                continue
            seen.add(task.id)
            lanes[task.status].items.append(task)
        return cls(lanes=lanes)

    def ordered_lanes(self) -> list[Lane]:
        """Lanes in display order."""
        return [self.lanes[status] for status in LANE_ORDER]

    def lane(self, lane_id: TaskStatus | str) -> Lane:
        """Get a lane by id."""
        return self.lanes[TaskStatus(lane_id)]

    @property
    def task_count(self) -> int:
        return sum(len(lane) for lane in self.lanes.values())

    def task_ids(self) -> list[str]:
        """All task ids, lane by lane in display order."""
        return [task.id for lane in self.ordered_lanes() for task in lane.items]

    def find(self, task_id: str) -> tuple[TaskStatus, int] | None:
        """Locate a task: (lane id, index) or None if not on the board."""
        for lane in self.ordered_lanes():
            for index, task in enumerate(lane.items):
                if task.id == task_id:
                    return lane.id, index
        return None

    def move_within_lane(self, lane: TaskStatus | str, from_index: int, to_index: int) -> Board:
        """Reorder a task inside one lane. Display order only."""
        lane_id = TaskStatus(lane)
        items = list(self.lanes[lane_id].items)
        _check_index(from_index, len(items), "from_index")
        _check_index(to_index, len(items), "to_index")

        moved = items.pop(from_index)
        items.insert(to_index, moved)
        return self._replace({lane_id: items})

    def move_across_lanes(
        self,
        source: TaskStatus | str,
        dest: TaskStatus | str,
        from_index: int,
        to_index: int,
    ) -> tuple[Board, Task]:
        """Move a task to another lane, changing its status.

        Returns:
            (new board, moved task with its new status)
        """
        source_id = TaskStatus(source)
        dest_id = TaskStatus(dest)
        if source_id == dest_id:
            raise ValueError("move_across_lanes needs two different lanes")

        source_items = list(self.lanes[source_id].items)
        dest_items = list(self.lanes[dest_id].items)
        _check_index(from_index, len(source_items), "from_index")
        # Inserting at the end of the destination is allowed
        _check_index(to_index, len(dest_items) + 1, "to_index")

        moved = source_items.pop(from_index).with_status(dest_id)
        dest_items.insert(to_index, moved)
        board = self._replace({source_id: source_items, dest_id: dest_items})
        return board, moved

    def _replace(self, changed: dict[TaskStatus, list[Task]]) -> Board:
        lanes = {
            status: Lane(id=status, items=changed[status]) if status in changed else lane
            for status, lane in self.lanes.items()
        }
        return Board(lanes=lanes)


def _check_statuses(lane_id: TaskStatus, items: list[Task]) -> None:
    for task in items:
        if task.status != lane_id:
            raise ValueError(
                f"Task {task.id} has status {task.status.value} but sits in lane {lane_id.value}"
            )


def _check_index(index: int, length: int, name: str) -> None:
    """Fail fast on an out-of-range position instead of clamping."""
    if index < 0 or index >= length:
        raise IndexError(f"{name} {index} out of range for lane of size {length}")
