"""Logging setup for invoicer modules."""

import logging
import os

# WARNING keeps CLI output clean unless LOG_LEVEL asks for more
_LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def logger(name: str) -> logging.Logger:
    """Return the module logger, attaching a stderr handler on first use."""
    log = logging.getLogger(name)

    if not log.handlers:
        log.setLevel(getattr(logging, _LOG_LEVEL, logging.WARNING))
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        log.addHandler(handler)

    return log
