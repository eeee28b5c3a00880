"""Process-wide logging configuration.

Handlers log through ``logging.getLogger(__name__)`` and pass structured
fields via ``extra=``; the JSON formatter turns those into keys.
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_HANDLER_NAME = "linkit"


def configure_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Attach a single stderr handler to the ``linkit`` logger (idempotent)."""
    logger = logging.getLogger("linkit")
    logger.setLevel(level)
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if json_output:
        handler.setFormatter(JsonFormatter(_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
