"""Service for shared room codes."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from ..api import ApiClient, ApiError
from ..errors import ConflictFailure, CreateFailure, ValidationFailure
from ..models import RoomCode, normalize_room_code
from ..session import SessionGate

logger = logging.getLogger(__name__)


class RoomService:
    """Creates and joins collaboration rooms.

    Keeps the last created and last joined code for display. Rooms do
    not change which tasks the board shows; that scoping is up to the
    backend.
    """

    def __init__(self, client: ApiClient, gate: SessionGate) -> None:
        self._client = client
        self._gate = gate
        self.created_code: RoomCode | None = None
        self.joined_code: RoomCode | None = None
        self.message: str = ""

    async def create_room(self) -> RoomCode:
        """Ask the backend to mint a new room code."""
        self.message = ""

        async def op(token: str) -> Any:
            return await self._client.request("POST", "/create-room", token=token)

        try:
            data = await self._gate.call(op)
            code = RoomCode.model_validate(data)
        except ApiError as e:
            self.message = e.detail or "Failed to create room"
            logger.error("Failed to create room: %s", e.message)
            raise CreateFailure(self.message) from e
        except ValidationError as e:
            self.message = "Error creating room"
            logger.error("Malformed create-room response: %s", e)
            raise CreateFailure(self.message) from e

        self.created_code = code
        logger.info("Room created: %s", code)
        return code

    async def join_room(self, input_code: str) -> RoomCode:
        """Join an existing room by code (case-insensitive)."""
        code = normalize_room_code(input_code)
        if not code:
            self.message = "Please enter a room code"
            raise ValidationFailure(self.message)

        self.message = ""

        async def op(token: str) -> Any:
            return await self._client.request(
                "POST", "/join-room", token=token, json={"code": code}
            )

        try:
            data = await self._gate.call(op)
            joined = RoomCode.model_validate(data)
        except ApiError as e:
            self.message = e.detail or "Failed to join room"
            logger.warning("Join room %s rejected: %s", code, self.message)
            raise ConflictFailure(self.message) from e
        except ValidationError as e:
            self.message = "Error joining room"
            logger.error("Malformed join-room response: %s", e)
            raise ConflictFailure(self.message) from e

        self.joined_code = joined
        self.message = f"Joined room {joined}"
        logger.info("Joined room %s", joined)
        return joined
