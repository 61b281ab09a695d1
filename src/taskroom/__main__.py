"""CLI entry point for taskroom."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="taskroom",
        description="Terminal kanban board client with shared rooms",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        help="Backend base URL (default: $TASKROOM_API_URL or http://localhost:5000)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG, -vvv adds HTTP)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "--login",
        metavar="EMAIL",
        default=None,
        help="Log in with email and password, then exit",
    )
    commands.add_argument(
        "--register",
        action="store_true",
        help="Create an account, then exit",
    )
    commands.add_argument(
        "--google-url",
        action="store_true",
        help="Print the Google login URL and exit",
    )
    commands.add_argument(
        "--oauth-callback",
        metavar="URL",
        default=None,
        help="Finish Google login from the callback URL containing ?token=",
    )
    commands.add_argument(
        "--logout",
        action="store_true",
        help="Forget the stored session token and exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.api_url:
        settings_kwargs["api_url"] = args.api_url
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    if args.login or args.register or args.google_url or args.oauth_callback or args.logout:
        from .cli import auth

        if args.login:
            exit_code = auth.run_login(settings, args.login)
        elif args.register:
            exit_code = auth.run_register(settings)
        elif args.google_url:
            exit_code = auth.run_google_url(settings)
        elif args.oauth_callback:
            exit_code = auth.run_oauth_callback(settings, args.oauth_callback)
        else:
            exit_code = auth.run_logout(settings)
        raise SystemExit(exit_code)

    # Import here so one-shot commands don't load Textual
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
