"""
Helpers shared by the list and word services.

They turn pydantic validation failures into ``InvalidInput`` and
perform the load-then-authorise sequence every list-scoped operation
starts with.
"""

import logging
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.context import CallContext
from ..core.db import RecordStore
from ..core.errors import InvalidInput, NotFound, Unauthorized
from ..schemas.vocabulary_list import VocabularyList

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

LIST_ENTITY = "Vocabulary list"
WORD_ENTITY = "Word"


def parse_payload(model: Type[M], data: Any) -> M:
    """Validate ``data`` against ``model`` or raise ``InvalidInput``."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
            for err in exc.errors()
        )
        raise InvalidInput(f"Invalid {model.__name__}: {problems}") from exc


def ensure_owner(creator: str, ctx: CallContext, entity: str, identifier: str) -> None:
    if creator != ctx.caller:
        logger.warning("Caller %s refused access to %s %s", ctx.caller, entity, identifier)
        raise Unauthorized(entity, identifier)


def load_owned_list(list_store: RecordStore, list_id: str, ctx: CallContext) -> VocabularyList:
    """Fetch a list and check that the caller created it."""
    vocab_list = list_store.get(list_id)
    if vocab_list is None:
        raise NotFound(LIST_ENTITY, list_id)
    ensure_owner(vocab_list.creator, ctx, LIST_ENTITY, list_id)
    return vocab_list
