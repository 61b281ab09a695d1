"""Authorization gate every authenticated call goes through."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from ..api import ApiAuthError
from ..errors import AuthFailure
from .context import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SessionGate:
    """Decides whether an authenticated operation may proceed.

    Owns the single recovery path for authorization failures: clear the
    session, then hand control to ``on_unauthorized`` (the view uses it to
    show the login screen). Callers get an AuthFailure and must abort.
    Nothing is retried.
    """

    def __init__(
        self,
        session: Session,
        on_unauthorized: Callable[[], None] | None = None,
    ) -> None:
        self.session = session
        self.on_unauthorized = on_unauthorized

    def require_session(self) -> str:
        """Return the current token, or recover and raise AuthFailure."""
        token = self.session.token
        if not token:
            logger.info("No session token; redirecting to login")
            self.recover()
            raise AuthFailure("Please log in to continue.")
        return token

    async def call(self, operation: Callable[[str], Awaitable[T]]) -> T:
        """Run ``operation(token)`` behind the gate.

        Raises:
            AuthFailure: No session, or the backend answered 401
        """
        token = self.require_session()
        try:
            return await operation(token)
        except ApiAuthError as e:
            logger.warning("Backend rejected session token: %s", e.message)
            self.recover()
            raise AuthFailure() from e

    def recover(self) -> None:
        """Forced logout: clear the token and navigate to login."""
        self.session.clear()
        if self.on_unauthorized is not None:
            self.on_unauthorized()
