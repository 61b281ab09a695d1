"""UI components."""

from .screens.board import BoardScreen
from .screens.login import LoginScreen
from .widgets.column import LaneColumn
from .widgets.task_card import TaskCard

__all__ = [
    "BoardScreen",
    "LaneColumn",
    "LoginScreen",
    "TaskCard",
]
