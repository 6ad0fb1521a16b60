"""Console logging setup for the service process."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "greeter-console"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single console handler to the root logger and set its level."""
    root = logging.getLogger()
    root.setLevel(level)

    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
