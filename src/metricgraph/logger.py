"""Package logger for metricgraph.

Modules log through ``logging.getLogger(__name__)`` and inherit the stdout
handler installed here. Banding reports dropped records at DEBUG level.
"""

import logging
import sys

logger = logging.getLogger("metricgraph")

_FORMAT = "metricgraph: %(message)s"
_HANDLER_NAME = "metricgraph"


def _own_handler() -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None


def setup_logger(level: int = logging.INFO) -> None:
    """Install the stdout handler, or adjust its level if already installed.

    Handlers attached by the host application (or a test runner) are left
    alone.

    Args:
        level: Logging level (default: INFO)
    """
    handler = _own_handler()
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)

    handler.setLevel(level)
    logger.setLevel(level)
    logger.propagate = False


setup_logger()
