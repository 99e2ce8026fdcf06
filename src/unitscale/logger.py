"""Package-wide logger. Silent unless the host application configures logging."""

import logging

__all__ = ("logger",)

logger = logging.getLogger("unitscale")
logger.addHandler(logging.NullHandler())
