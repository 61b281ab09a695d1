"""Wiring of the client, session and services from Settings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import httpx

from ..api import ApiClient
from ..config import Settings
from ..repositories import TaskRepository
from ..session import Session, SessionGate, TokenStore
from ..sync import DragReconciler
from .auth_service import AuthService
from .board_service import BoardService
from .room_service import RoomService


@dataclass
class Services:
    """Everything a front end needs, sharing one Session."""

    client: ApiClient
    session: Session
    gate: SessionGate
    auth: AuthService
    repository: TaskRepository
    board: BoardService
    drag: DragReconciler
    rooms: RoomService

    async def aclose(self) -> None:
        await self.client.aclose()


def build_services(
    settings: Settings,
    on_unauthorized: Callable[[], None] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Services:
    """Create the service graph.

    Args:
        settings: Application settings
        on_unauthorized: Called after a forced logout (e.g. show login)
        transport: Optional httpx transport (used by tests)
    """
    client = ApiClient(settings.api_url, timeout=settings.request_timeout, transport=transport)
    session = Session(TokenStore(settings.token_file))
    gate = SessionGate(session, on_unauthorized)
    repository = TaskRepository(client, gate)
    board = BoardService(repository)
    return Services(
        client=client,
        session=session,
        gate=gate,
        auth=AuthService(client, session),
        repository=repository,
        board=board,
        drag=DragReconciler(board, repository, revert_on_failure=settings.revert_failed_moves),
        rooms=RoomService(client, gate),
    )
