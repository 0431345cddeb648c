"""Logging setup for launchsync runs."""

from __future__ import annotations

import logging
from typing import Final

LOG_FORMAT: Final = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
# Each of these logs every request at INFO.
HTTP_CLIENT_LOGGERS: Final = ("httpx", "httpcore", "hishel")


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Configure the root logger for scheduled reconciliation runs.

    ``verbose`` switches to DEBUG and lets the HTTP client libraries log their
    requests too; otherwise they are held at WARNING. Pass ``force=True`` to replace
    handlers installed earlier.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )
    for name in HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)
