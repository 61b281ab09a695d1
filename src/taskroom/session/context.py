"""The single session owned by a running client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .store import TokenStore

logger = logging.getLogger(__name__)


class Session:
    """Holds the current bearer token.

    One instance per client, passed explicitly to whatever needs it.
    If a TokenStore is attached, the token survives restarts until
    cleared.
    """

    def __init__(self, store: TokenStore | None = None, token: str | None = None) -> None:
        self._store = store
        self._token = token
        if self._token is None and store is not None:
            self._token = store.load()

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_active(self) -> bool:
        return bool(self._token)

    def start(self, token: str) -> None:
        """Begin a session with a freshly issued token."""
        if not token:
            raise ValueError("Cannot start a session with an empty token")
        self._token = token
        if self._store is not None:
            self._store.save(token)
        logger.info("Session started")

    def clear(self) -> None:
        """End the session and forget the stored token."""
        self._token = None
        if self._store is not None:
            self._store.clear()
        logger.info("Session cleared")
