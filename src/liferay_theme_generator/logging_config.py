"""Process-wide Loguru configuration.

Policy:
- no flag: no handler, nothing is logged;
- ``--verbose``: INFO to stderr;
- ``--debug``: DEBUG to stderr, with backtrace and diagnose.
"""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT: str = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> "
    "<level>{level: <8}</level> "
    "<level>{message}</level>"
)


def configure_logging(*, debug: bool, verbose: bool = False) -> None:
    logger.remove()

    if not debug and not verbose:
        return

    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "INFO",
        backtrace=debug,
        diagnose=debug,
        format=LOG_FORMAT,
    )
