"""Translate keyboard moves into drag gestures.

The terminal has no pointer dragging, so shift+arrow keys stand in for
it. Each helper returns a gesture whose indices are valid for the given
board, or None when the move would leave the board.
"""

from __future__ import annotations

from ..models import LANE_ORDER, Board, DragGesture, DropLocation, TaskStatus


def lane_move(board: Board, lane: TaskStatus, index: int, delta: int) -> DragGesture | None:
    """Drag the task at (lane, index) ``delta`` lanes left or right.

    The task keeps its row where the destination lane is long enough,
    otherwise it lands at the end.
    """
    task = _task_at(board, lane, index)
    lane_pos = LANE_ORDER.index(lane) + delta
    if task is None or not 0 <= lane_pos < len(LANE_ORDER):
        return None

    dest_lane = LANE_ORDER[lane_pos]
    dest_index = min(index, len(board.lane(dest_lane)))
    return DragGesture(
        task_id=task.id,
        source=DropLocation(lane, index),
        destination=DropLocation(dest_lane, dest_index),
    )


def row_move(board: Board, lane: TaskStatus, index: int, delta: int) -> DragGesture | None:
    """Drag the task at (lane, index) ``delta`` rows up or down its lane."""
    task = _task_at(board, lane, index)
    new_index = index + delta
    if task is None or not 0 <= new_index < len(board.lane(lane)):
        return None

    return DragGesture(
        task_id=task.id,
        source=DropLocation(lane, index),
        destination=DropLocation(lane, new_index),
    )


def _task_at(board: Board, lane: TaskStatus, index: int):
    items = board.lane(lane).items
    if 0 <= index < len(items):
        return items[index]
    return None
