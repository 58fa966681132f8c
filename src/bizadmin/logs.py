"""Logging configuration for the CLI."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Human-readable logs on stderr. Report output stays on stdout."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
