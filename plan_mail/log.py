"""
Logging setup shared by the Vercel functions, the FastAPI app and the CLI.
"""

from __future__ import annotations

import sys

from loguru import logger

from plan_mail.config.settings import log_level

_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with a single stderr sink.

    Safe to call from every entrypoint; only the first call installs the sink
    unless an explicit level is passed.
    """
    global _CONFIGURED
    if _CONFIGURED and level is None:
        return
    logger.remove()
    logger.add(
        sys.stderr,
        level=level or log_level(),
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        backtrace=False,
        diagnose=False,
    )
    _CONFIGURED = True
