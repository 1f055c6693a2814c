"""Shared logging configuration for CLI and MCP entry points.

Call ``configure_logging()`` once at an entry point. The function is
idempotent: if the root logger already has handlers, it does nothing.
"""

from __future__ import annotations

import logging
import sys


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure the root logger with a stderr handler."""
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root.addHandler(handler)
    root.setLevel(level)
