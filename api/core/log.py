"""
Process-wide logging setup.

Modules log through `logging.getLogger(__name__)` with key=value messages,
e.g. `logger.info("post_created id=%s", post_id)`.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op when the root logger already has handlers.
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
