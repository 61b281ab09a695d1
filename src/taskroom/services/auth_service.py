"""Service for login, signup and OAuth callbacks."""

from __future__ import annotations

import logging
from urllib.parse import parse_qs, urlsplit

from pydantic import ValidationError

from ..api import ApiClient, ApiError
from ..errors import AuthFailure, CreateFailure, ValidationFailure
from ..models import TokenResponse
from ..session import Session

logger = logging.getLogger(__name__)


class AuthService:
    """Obtains a session token and hands it to the Session."""

    def __init__(self, client: ApiClient, session: Session) -> None:
        self._client = client
        self.session = session

    async def login(self, email: str, password: str) -> str:
        """Log in with email and password and start the session.

        Raises:
            ValidationFailure: Missing email or password
            AuthFailure: Credentials rejected or the request failed
        """
        email = email.strip()
        if not email or not password:
            raise ValidationFailure("Email and password are required")

        try:
            data = await self._client.request(
                "POST", "/login", json={"email": email, "password": password}
            )
            token = TokenResponse.model_validate(data).token
        except ApiError as e:
            logger.warning("Login failed for %s: %s", email, e.message)
            raise AuthFailure(e.detail or "Invalid email or password") from e
        except ValidationError as e:
            logger.error("Malformed login response: %s", e)
            raise AuthFailure("Invalid email or password") from e

        self.session.start(token)
        logger.info("Logged in as %s", email)
        return token

    async def register(self, name: str, email: str, password: str) -> None:
        """Create an account. The user logs in afterwards.

        Raises:
            ValidationFailure: A field is blank
            CreateFailure: The backend refused the registration
        """
        name = name.strip()
        email = email.strip()
        if not name or not email or not password:
            raise ValidationFailure("Name, email and password are required")

        try:
            await self._client.request(
                "POST",
                "/register",
                json={"name": name, "email": email, "password": password},
            )
        except ApiError as e:
            logger.warning("Registration failed for %s: %s", email, e.message)
            raise CreateFailure("Failed to register. Please try again.") from e

        logger.info("Registered %s", email)

    def google_login_url(self, redirect_uri: str) -> str:
        """URL that starts the Google OAuth flow in a browser."""
        return self._client.url_for("/google-login", {"redirect_uri": redirect_uri})

    def complete_oauth(self, callback_url: str) -> str:
        """Start the session from the OAuth callback URL's ``?token=``.

        Raises:
            AuthFailure: The callback carried no token
        """
        query = parse_qs(urlsplit(callback_url).query)
        tokens = query.get("token")
        if not tokens or not tokens[0]:
            logger.warning("OAuth callback without a token")
            raise AuthFailure("Google Login Failed!")

        self.session.start(tokens[0])
        logger.info("Logged in via Google")
        return tokens[0]

    def logout(self) -> None:
        """End the session."""
        self.session.clear()
