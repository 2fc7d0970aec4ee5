"""Logging setup for the application."""

import logging
import sys

NOISY_LOGGERS = ("httpx", "httpcore", "passlib", "sqlalchemy.engine")
# passlib logs a traceback at warning level while probing the bcrypt version
SILENCED_LOGGERS = ("passlib.handlers.bcrypt",)


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once at startup."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    for name in SILENCED_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)
