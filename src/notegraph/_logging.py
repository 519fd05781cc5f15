"""Logging configuration for notegraph.

Usage in other modules:
    import logging
    log = logging.getLogger(__name__)

The log level can be configured via the NOTEGRAPH_LOG_LEVEL environment variable
(DEBUG, INFO, WARNING, ERROR). The default is INFO.
"""

import logging
import os
import sys

from .config import LOG_LEVEL_ENV_VAR


def configure_logging() -> None:
    """Configure logging for the notegraph package.

    Call this once at application startup (the CLI does).
    Subsequent calls are no-ops.
    """
    root_logger = logging.getLogger("notegraph")

    # Skip if already configured (has handlers)
    if root_logger.handlers:
        return

    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt="[%(levelname)s] %(name)s: %(message)s"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # Prevent propagation to root logger (avoids duplicate messages)
    root_logger.propagate = False
