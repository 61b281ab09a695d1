"""Drag-and-drop reconciliation between the local board and the backend.

A drop is applied to the board optimistically: listeners see the new
board before the backend is asked to change anything. Only moves across
lanes change a task's status, so only those reach the backend.

By default a failed status update is not rolled back. The board then
shows the task in its new lane while the backend still has the old
status, until the next full refresh. ``revert_on_failure=True`` moves
the task back instead.
"""

from __future__ import annotations

import logging

from ..errors import UpdateFailure
from ..models import (
    Board,
    DragGesture,
    DragOutcome,
    DragResult,
    ReconcileState,
    TaskUpdate,
)
from ..repositories import TaskRepositoryProtocol
from ..services.board_service import BoardService

logger = logging.getLogger(__name__)

MOVE_FAILED_MESSAGE = "Failed to update task status."


class DragReconciler:
    """Applies drag gestures to the board and persists status changes."""

    def __init__(
        self,
        board_service: BoardService,
        repository: TaskRepositoryProtocol,
        revert_on_failure: bool = False,
    ) -> None:
        """Initialize the reconciler.

        Args:
            board_service: Owner of the board being dragged on
            repository: Where status changes are persisted
            revert_on_failure: Undo the local move if the backend update fails
        """
        self._board_service = board_service
        self._repository = repository
        self.revert_on_failure = revert_on_failure
        # Gestures whose remote update has not resolved yet
        self._in_flight = 0

    @property
    def state(self) -> ReconcileState:
        if self._in_flight:
            return ReconcileState.RECONCILING
        return ReconcileState.IDLE

    async def on_drag_end(self, gesture: DragGesture) -> DragOutcome:
        """Handle a finished drag.

        Raises:
            IndexError: The gesture's indices do not fit the current board
            ValueError: The task at the source is not the dragged task
            AuthFailure: The session is missing or was rejected
        """
        source, destination = gesture.source, gesture.destination
        if destination is None:
            logger.debug("Drag of %s dropped outside any lane", gesture.task_id)
            return DragOutcome(DragResult.DROPPED_OUTSIDE)

        board = self._board_service.board
        _check_source(board, gesture)

        if source.lane == destination.lane:
            if source.index == destination.index:
                return DragOutcome(DragResult.UNCHANGED)
            new_board = board.move_within_lane(source.lane, source.index, destination.index)
            task = new_board.lane(destination.lane).items[destination.index]
            self._board_service.publish(new_board)
            logger.debug(
                "Task reordered in %s: %s (pos %d -> %d)",
                source.lane.value,
                task.id,
                source.index,
                destination.index,
            )
            return DragOutcome(DragResult.REORDERED, task=task)

        new_board, moved = board.move_across_lanes(
            source.lane, destination.lane, source.index, destination.index
        )
        self._board_service.publish(new_board)
        logger.info(
            "Task moved: %s (%s -> %s)", moved.id, source.lane.value, destination.lane.value
        )

        self._in_flight += 1
        try:
            await self._repository.update_task(moved.id, TaskUpdate(status=moved.status))
        except UpdateFailure as e:
            logger.warning("Status update failed for %s: %s", moved.id, e.message)
            reverted = self.revert_on_failure and self._revert(gesture)
            return DragOutcome(
                DragResult.MOVE_FAILED,
                task=moved,
                error=MOVE_FAILED_MESSAGE,
                reverted=reverted,
            )
        finally:
            self._in_flight -= 1

        return DragOutcome(DragResult.MOVED, task=moved)

    def _revert(self, gesture: DragGesture) -> bool:
        """Put a task back in its source lane after a failed update.

        Works on the board as it is now, since other drags or a refresh
        may have changed it while the update was in flight.
        """
        board = self._board_service.board
        location = board.find(gesture.task_id)
        destination = gesture.destination
        if location is None or destination is None or location[0] != destination.lane:
            logger.debug("Not reverting %s: task has moved on", gesture.task_id)
            return False

        lane_id, index = location
        source = gesture.source
        to_index = min(source.index, len(board.lane(source.lane)))
        reverted_board, _ = board.move_across_lanes(lane_id, source.lane, index, to_index)
        self._board_service.publish(reverted_board)
        logger.info("Reverted move of %s back to %s", gesture.task_id, source.lane.value)
        return True


def _check_source(board: Board, gesture: DragGesture) -> None:
    """Fail fast unless the dragged task is where the gesture says it started."""
    source = gesture.source
    items = board.lane(source.lane).items
    if not 0 <= source.index < len(items):
        raise IndexError(
            f"source index {source.index} out of range for lane of size {len(items)}"
        )
    found = items[source.index].id
    if found != gesture.task_id:
        raise ValueError(
            f"Gesture is for task {gesture.task_id} but {found} is at "
            f"{source.lane.value}[{source.index}]"
        )
