"""One-shot account commands: login, register, Google OAuth, logout."""

from __future__ import annotations

import asyncio
import getpass
import logging

from ..config import Settings
from ..errors import TaskroomError
from ..services.factory import Services, build_services
from .output import error, header, info, success

logger = logging.getLogger(__name__)


def run_login(settings: Settings, email: str) -> int:
    """Log in with email and a prompted password, storing the token.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    password = getpass.getpass("Password: ")
    services = build_services(settings)

    header(f"Logging in to {settings.api_url}...")
    try:
        asyncio.run(_close_after(services, services.auth.login(email, password)))
    except TaskroomError as e:
        logger.debug("Login command failed: %s", e.message)
        error(e.message)
        return 1

    success("Login successful")
    info(f"Token saved to {settings.token_file}")
    return 0


def run_register(settings: Settings) -> int:
    """Create an account from prompted details."""
    name = input("Full name: ")
    email = input("Email: ")
    password = getpass.getpass("Password: ")
    services = build_services(settings)

    try:
        asyncio.run(_close_after(services, services.auth.register(name, email, password)))
    except TaskroomError as e:
        error(e.message)
        return 1

    success("Signup successful!")
    info(f"Log in with: taskroom --login {email.strip()}")
    return 0


def run_google_url(settings: Settings) -> int:
    """Print the URL that starts Google login in a browser."""
    services = build_services(settings)
    try:
        url = services.auth.google_login_url(settings.oauth_redirect_uri)
    finally:
        _close(services)
    header("Open this URL in a browser to continue with Google:")
    print(url)
    info("Then run: taskroom --oauth-callback '<callback URL>'")
    return 0


def run_oauth_callback(settings: Settings, callback_url: str) -> int:
    """Finish Google login from the callback URL the browser landed on."""
    services = build_services(settings)
    try:
        services.auth.complete_oauth(callback_url)
    except TaskroomError as e:
        error(e.message)
        return 1
    finally:
        _close(services)

    success("Logged in with Google")
    return 0


def run_logout(settings: Settings) -> int:
    """Forget the stored session token."""
    services = build_services(settings)
    try:
        services.auth.logout()
    finally:
        _close(services)
    success("Logged out")
    return 0


def _close(services: Services) -> None:
    """Release the HTTP client of a command that never used it."""
    asyncio.run(services.aclose())


async def _close_after(services: Services, operation) -> None:
    try:
        await operation
    finally:
        await services.aclose()
