"""Loguru helpers for driveexport."""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

_configured: bool = False


def setup_logging(level: str = "INFO") -> None:
    """Install a single stderr sink at `level`. Repeated calls are ignored."""
    global _configured
    if _configured:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[module]}</cyan> | "
            "<level>{message}</level>"
        ),
        filter=lambda record: "module" in record["extra"],
    )
    _configured = True


def get_logger(module_name: str) -> Any:
    """Return the shared logger bound to `module_name`."""
    return logger.bind(module=module_name)
