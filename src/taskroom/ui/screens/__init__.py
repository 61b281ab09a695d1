"""Screen components."""

from .board import BoardScreen
from .login import LoginScreen

__all__ = [
    "BoardScreen",
    "LoginScreen",
]
