"""Logging setup shared by every entrypoint that embeds the package."""

import logging

from accounts.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(debug: bool | None = None) -> None:
    if debug is None:
        debug = settings.DEBUG
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
    )
    logging.getLogger(__name__).debug("Logging configured (debug=%s).", debug)
