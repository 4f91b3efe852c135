"""Diagnostics logging for sshhop (stderr, one line per record)."""
from __future__ import annotations

import logging

from sshhop.errors import UsageError

LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def setup_logging(level: str) -> None:
    """Configure the root logger at the named level.

    Raises:
        UsageError: if ``level`` is not one of LEVEL_NAMES (case-insensitive).
    """
    name = level.strip().upper()
    if name not in LEVEL_NAMES:
        raise UsageError(
            f"Unknown log level: {level} (choose from {', '.join(LEVEL_NAMES)})"
        )

    logging.basicConfig(
        level=getattr(logging, name),
        format="%(levelname)s: %(name)s: %(message)s",
    )


__all__ = ["setup_logging", "LEVEL_NAMES"]
