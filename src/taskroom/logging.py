"""Logging configuration for taskroom."""

import logging
import re
import sys
from datetime import UTC, datetime
from pathlib import Path

# Matches "token=..." in URLs and "Bearer ..." in headers
_SECRET_PATTERN = re.compile(r"(token=|Bearer\s+)[^\s&\"']+")


class RedactTokensFilter(logging.Filter):
    """Mask session tokens in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _SECRET_PATTERN.sub(r"\1***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure logging based on verbosity level and optional file output.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2=DEBUG, 3+=DEBUG including httpx)
        log_file: Optional path to write logs to file
    """
    if verbose == 0 and log_file is None:
        return

    level = logging.DEBUG if verbose >= 2 else logging.INFO

    logger = logging.getLogger("taskroom")
    logger.setLevel(level)
    # Calling twice (e.g. from tests) must not duplicate output
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    redact = RedactTokensFilter()

    handlers: list[logging.Handler] = []
    if verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(redact)
        logger.addHandler(handler)

    # httpx logs every request at INFO with the full URL; only show it at -vvv
    for name in ("httpx", "httpcore"):
        http_logger = logging.getLogger(name)
        for handler in list(http_logger.handlers):
            if any(isinstance(f, RedactTokensFilter) for f in handler.filters):
                http_logger.removeHandler(handler)
        if verbose >= 3:
            http_logger.setLevel(logging.DEBUG)
            for handler in handlers:
                http_logger.addHandler(handler)
        else:
            http_logger.setLevel(logging.WARNING)

    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("taskroom starting | %s | level=%s", timestamp, logging.getLevelName(level))
