"""
Mapping of document-store failures to HTTP errors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """
    Turn a driver error raised inside the block into a 400 carrying `message`.

    The message names the failed operation ("Couldn't get all categories") and
    never includes driver details; those go to the log.
    """
    try:
        yield
    except PyMongoError as exc:
        logger.exception("store_operation_failed operation=%r", message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message) from exc


def not_found(resource: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Couldn't find {resource}")
