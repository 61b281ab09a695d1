"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    api_url: str = Field(
        default="http://localhost:5000",
        description="Base URL of the task board backend",
    )

    token_file: Path = Field(
        default_factory=lambda: Path.home() / ".config" / "taskroom" / "token",
        description="Where the session token is kept between runs",
    )

    oauth_redirect_uri: str = Field(
        default="http://localhost:3000/google-callback",
        description="Callback URL handed to the Google login flow",
    )

    revert_failed_moves: bool = Field(
        default=False,
        description="Move a task back if its status update fails",
    )

    request_timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TASKROOM_",
    }
