"""Process-wide logging setup."""

from __future__ import annotations

import logging
import sys

from .config import settings


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure logging to stdout with timestamps, levels and module names."""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # Access logs are noisy for a compute-only service
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return logging.getLogger("truckroutes")
