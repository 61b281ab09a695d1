"""Task board REST API client."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from ..models import ErrorMessage

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base exception for API transport errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail  # The backend's own {"message": ...}, if any


class ApiAuthError(ApiError):
    """The backend rejected the credentials (HTTP 401)."""

    pass


class ApiNotFoundError(ApiError):
    """Resource not found (HTTP 404)."""

    pass


class ApiClient:
    """Async HTTP client for the task board backend.

    Provides a thin wrapper around httpx with:
    - Bearer token authentication per request
    - Status code to exception mapping
    - Extraction of the backend's {"message": ...} error bodies
    - Request timing in the logs
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            base_url: Backend base URL, e.g. http://localhost:5000
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def url_for(self, path: str, params: dict[str, str] | None = None) -> str:
        """Absolute URL for a path, for links opened outside the client."""
        url = httpx.URL(f"{self.base_url}{path}")
        if params:
            url = url.copy_merge_params(params)
        return str(url)

    async def request(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            token: Bearer token, or None for unauthenticated endpoints
            json: Request body

        Returns:
            Decoded JSON, or None for an empty body

        Raises:
            ApiAuthError: 401 Unauthorized
            ApiNotFoundError: 404 Not Found
            ApiError: Network failures and any other non-2xx status
        """
        headers = {"Authorization": f"Bearer {token}"} if token else None

        start_time = time.monotonic()
        try:
            response = await self._client.request(method, path, json=json, headers=headers)
        except httpx.RequestError as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            logger.error("%s %s failed after %.0fms: %s", method, path, elapsed_ms, e)
            raise ApiError(f"Request failed: {e}") from e

        elapsed_ms = (time.monotonic() - start_time) * 1000
        status = response.status_code
        detail = _error_message(response) if status >= 400 else None

        if status == 401:
            logger.warning("%s %s: 401 Unauthorized (%.0fms)", method, path, elapsed_ms)
            raise ApiAuthError(detail or "Unauthorized", status, detail)
        if status == 404:
            logger.error("%s %s: 404 Not Found (%.0fms)", method, path, elapsed_ms)
            raise ApiNotFoundError(detail or "Resource not found", status, detail)
        if status >= 400:
            logger.error("%s %s: HTTP %d (%.0fms)", method, path, status, elapsed_ms)
            raise ApiError(detail or f"HTTP {status}", status, detail)

        logger.info("%s %s: %d (%.0fms)", method, path, status, elapsed_ms)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error("%s %s: Invalid JSON response", method, path)
            raise ApiError(f"Invalid JSON response: {e}", status) from e


def _error_message(response: httpx.Response) -> str | None:
    """Pull the backend's human-readable message out of an error body."""
    try:
        body = ErrorMessage.model_validate(response.json())
    except ValueError:
        # Not JSON, or not the {"message": ...} shape
        return None
    return body.message or None
