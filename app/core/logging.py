"""
Logging setup.

Configures the stdlib root logger once at application startup.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send application logs to stdout at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    for noisy in ("sqlalchemy.engine", "sqlalchemy.pool", "httpx", "multipart"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
