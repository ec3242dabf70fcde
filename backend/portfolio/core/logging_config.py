"""Console logging setup for the API process."""

import logging
import re
import sys

_CREDENTIALS_RE = re.compile(r"//([^:/@]+):([^@]+)@")


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the ``portfolio`` logger with a single stdout handler."""
    logger = logging.getLogger("portfolio")
    logger.setLevel(level.upper())

    # Clear existing handlers to avoid duplicates on re-init
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def mask_url(url: str) -> str:
    """Hide the password part of a connection string before logging it."""
    if not url:
        return "MISSING"
    return _CREDENTIALS_RE.sub(r"//\1:***@", url)
