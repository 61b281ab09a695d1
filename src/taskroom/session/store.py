"""On-disk persistence for the session token."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class TokenStore:
    """Keeps the bearer token in a single file between runs.

    The file is created with owner-only permissions.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> str | None:
        """Read the stored token, or None if there is none."""
        try:
            token = self.path.read_text().strip()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning("Cannot read token file %s: %s", self.path, e)
            return None
        return token or None

    def save(self, token: str) -> None:
        """Persist the token, replacing any previous one."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            f.write(token)
        logger.debug("Token saved to %s", self.path)

    def clear(self) -> None:
        """Remove the stored token. Missing file is fine."""
        self.path.unlink(missing_ok=True)
        logger.debug("Token file cleared: %s", self.path)
