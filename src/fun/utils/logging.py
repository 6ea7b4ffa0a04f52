"""Logging helpers for consistent instrumentation."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "INFO", rich_tracebacks: bool = True) -> None:
    """Configure the root logger with a rich handler.

    Unknown level names fall back to ``INFO``. Calling this again replaces the
    previously installed handler.
    """

    console = Console(stderr=True)
    handler = RichHandler(console=console, rich_tracebacks=rich_tracebacks)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


__all__ = ["setup_logging"]
