"""Room code and API payload schemas."""

from pydantic import BaseModel, field_validator


def normalize_room_code(value: str) -> str:
    """Trim and uppercase a user-supplied room code."""
    return value.strip().upper()


class RoomCode(BaseModel):
    """A shared room code, always uppercase alphanumeric."""

    code: str

    model_config = {"frozen": True}

    @field_validator("code", mode="before")
    @classmethod
    def validate_code(cls, v: object) -> object:
        if not isinstance(v, str):
            raise ValueError("Room code must be a string")
        code = normalize_room_code(v)
        if not code:
            raise ValueError("Room code cannot be empty")
        if not code.isalnum():
            raise ValueError("Room code must be alphanumeric")
        return code

    def __str__(self) -> str:
        return self.code


class TokenResponse(BaseModel):
    """Body of a successful POST /login."""

    token: str

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: str) -> str:
        if not v:
            raise ValueError("Token cannot be empty")
        return v


class ErrorMessage(BaseModel):
    """Error body the backend sends on rejection: {"message": "..."}."""

    message: str | None = None
