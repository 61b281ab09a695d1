"""Tests for RoomService."""

import pytest

from taskroom.errors import AuthFailure, ConflictFailure, CreateFailure, ValidationFailure
from taskroom.services import RoomService


@pytest.fixture
def rooms(client, gate) -> RoomService:
    return RoomService(client, gate)


class TestCreateRoom:
    """Tests for creating a room."""

    @pytest.mark.asyncio
    async def test_create_room(self, rooms, backend):
        backend.on("POST", "/create-room", json={"code": "QX7K2"})

        code = await rooms.create_room()

        assert code.code == "QX7K2"
        assert rooms.created_code == code
        assert backend.requests[0].headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_backend_message_surfaced(self, rooms, backend):
        backend.on("POST", "/create-room", status=500, json={"message": "Too many rooms"})
        with pytest.raises(CreateFailure) as exc_info:
            await rooms.create_room()
        assert exc_info.value.message == "Too many rooms"
        assert rooms.created_code is None
        assert rooms.message == "Too many rooms"

    @pytest.mark.asyncio
    async def test_default_message(self, rooms, backend):
        backend.on("POST", "/create-room", status=500)
        with pytest.raises(CreateFailure) as exc_info:
            await rooms.create_room()
        assert exc_info.value.message == "Failed to create room"
        assert rooms.message == "Failed to create room"

    @pytest.mark.asyncio
    async def test_malformed_response(self, rooms, backend):
        backend.on("POST", "/create-room", json={"room": "x"})
        with pytest.raises(CreateFailure) as exc_info:
            await rooms.create_room()
        assert exc_info.value.message == "Error creating room"
        assert rooms.message == "Error creating room"

    @pytest.mark.asyncio
    async def test_success_clears_previous_failure(self, rooms, backend):
        backend.on("POST", "/create-room", status=500, json={"message": "Too many rooms"})
        with pytest.raises(CreateFailure):
            await rooms.create_room()

        backend.on("POST", "/create-room", json={"code": "QX7K2"})
        await rooms.create_room()

        assert rooms.message == ""

    @pytest.mark.asyncio
    async def test_unauthorized(self, rooms, backend, session, on_unauthorized):
        backend.on("POST", "/create-room", status=401)
        with pytest.raises(AuthFailure):
            await rooms.create_room()
        assert not session.is_active
        on_unauthorized.assert_called_once()


class TestJoinRoom:
    """Tests for joining a room."""

    @pytest.mark.asyncio
    async def test_code_uppercased(self, rooms, backend):
        backend.on("POST", "/join-room", json={"code": "ABC12"})

        joined = await rooms.join_room(" abc12 ")

        assert backend.body() == {"code": "ABC12"}
        assert joined.code == "ABC12"
        assert rooms.joined_code == joined
        assert rooms.message == "Joined room ABC12"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["", "   "])
    async def test_empty_code_sends_nothing(self, rooms, backend, code):
        with pytest.raises(ValidationFailure):
            await rooms.join_room(code)
        assert rooms.message == "Please enter a room code"
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_unknown_code(self, rooms, backend):
        backend.on("POST", "/join-room", status=404, json={"message": "Room not found"})

        with pytest.raises(ConflictFailure) as exc_info:
            await rooms.join_room("NOPE1")

        assert exc_info.value.message == "Room not found"
        assert rooms.message == "Room not found"
        assert rooms.joined_code is None

    @pytest.mark.asyncio
    async def test_rejection_without_message(self, rooms, backend):
        backend.on("POST", "/join-room", status=400)
        with pytest.raises(ConflictFailure) as exc_info:
            await rooms.join_room("ABC12")
        assert exc_info.value.message == "Failed to join room"

    @pytest.mark.asyncio
    async def test_malformed_response(self, rooms, backend):
        backend.on("POST", "/join-room", json={})
        with pytest.raises(ConflictFailure):
            await rooms.join_room("ABC12")
        assert rooms.message == "Error joining room"
