"""
Response models shared by every feature, and validation of stored documents.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = logging.getLogger(__name__)


class EmptyResponse(BaseModel):
    """
    Body of successful writes: `{}`.
    """

    model_config = ConfigDict(extra="forbid")


def document_to_model(model: type[ModelT], row: dict[str, Any], *, collection: str) -> ModelT | None:
    """
    Validate one stored document. Documents that do not fit `model` (e.g.
    written under other field names by an older service) are logged and
    reported as None instead of failing the whole response.
    """
    try:
        return model.model_validate(row)
    except ValidationError as exc:
        logger.warning(
            "document_skipped collection=%s keys=%s errors=%d",
            collection,
            sorted(row),
            exc.error_count(),
        )
        return None


def documents_to_models(model: type[ModelT], rows: Iterable[dict[str, Any]], *, collection: str) -> list[ModelT]:
    items = (document_to_model(model, row, collection=collection) for row in rows)
    return [item for item in items if item is not None]
