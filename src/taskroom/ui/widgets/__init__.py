"""Widget components."""

from .column import LaneColumn
from .dialogs import ConfirmDeleteModal, EditTitleModal
from .room_bar import RoomBar
from .task_card import TaskCard

__all__ = [
    "ConfirmDeleteModal",
    "EditTitleModal",
    "LaneColumn",
    "RoomBar",
    "TaskCard",
]
