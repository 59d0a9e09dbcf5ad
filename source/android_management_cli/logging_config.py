# ABOUTME: Logging configuration for the Android Management CLI
# ABOUTME: Routes log records through rich to stderr, debug level via AMDM_DEBUG

"""Logging configuration module."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

NOISY_LOGGERS = ("googleapiclient.discovery", "googleapiclient.discovery_cache", "google.auth", "urllib3")


def debug_enabled() -> bool:
    return os.getenv("AMDM_DEBUG", "").lower() in ("1", "true", "yes")


def setup_logging(level: int | None = None) -> None:
    """Configure application-wide logging.

    Args:
        level: Logging level. Defaults to DEBUG when AMDM_DEBUG is set, WARNING otherwise.
    """
    if level is None:
        level = logging.DEBUG if debug_enabled() else logging.WARNING

    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
