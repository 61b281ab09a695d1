"""Backend API transport."""

from .client import ApiAuthError, ApiClient, ApiError, ApiNotFoundError

__all__ = [
    "ApiAuthError",
    "ApiClient",
    "ApiError",
    "ApiNotFoundError",
]
