"""Service layer for business logic."""

from .auth_service import AuthService
from .board_service import BoardService
from .room_service import RoomService

__all__ = [
    "AuthService",
    "BoardService",
    "RoomService",
]
