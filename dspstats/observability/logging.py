"""Standard Python logging configuration.

The statistics modules only emit records; host applications that embed
dspstats call ``setup_logging`` to route them to stdout.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from dspstats.config import get_config


def setup_logging(level: Optional[str] = None) -> None:
    """Configure standard Python logging.

    Call **exactly once** at startup of the host application. ``level``
    falls back to ``DSPSTATS_LOG_LEVEL`` via the package config.
    """
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return

    level = (level or get_config().log_level).upper()

    formatter = logging.Formatter(
        fmt='[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %z'
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    setup_logging._configured = True  # type: ignore[attr-defined]
