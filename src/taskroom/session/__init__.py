"""Session ownership and the authorization gate."""

from .context import Session
from .gate import SessionGate
from .store import TokenStore

__all__ = [
    "Session",
    "SessionGate",
    "TokenStore",
]
