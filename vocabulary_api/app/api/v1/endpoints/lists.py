"""
Vocabulary list endpoints for API v1.

These routes expose list CRUD plus the list-scoped word operations.
All of them except the full listing require the caller to be the
creator of the list.  Request bodies are passed to the services as
received so validation errors follow the service's error order.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from vocabulary_api.app.api.deps import body_field, get_list_service, get_word_service
from vocabulary_api.app.core.context import CallContext
from vocabulary_api.app.core.security import get_call_context, get_current_user
from vocabulary_api.app.schemas.vocabulary_list import DeleteResult, VocabularyList, WordCount
from vocabulary_api.app.schemas.word import Word
from vocabulary_api.app.services import ListService, WordService

router = APIRouter()


@router.post("/", response_model=VocabularyList, status_code=status.HTTP_201_CREATED)
async def create_list(
    body: Any = Body(None),
    ctx: CallContext = Depends(get_call_context),
    service: ListService = Depends(get_list_service),
) -> VocabularyList:
    """Create an empty list owned by the caller."""
    return service.create_list(body_field(body, "name"), ctx)


@router.get("/", response_model=List[VocabularyList])
async def list_lists(
    current_user: dict = Depends(get_current_user),
    service: ListService = Depends(get_list_service),
) -> List[VocabularyList]:
    """Return every list regardless of its creator."""
    return service.list_all_lists()


@router.get("/{list_id}", response_model=VocabularyList)
async def get_list(
    list_id: str,
    ctx: CallContext = Depends(get_call_context),
    service: ListService = Depends(get_list_service),
) -> VocabularyList:
    return service.get_list(list_id, ctx)


@router.put("/{list_id}", response_model=VocabularyList)
async def update_list(
    list_id: str,
    body: Any = Body(None),
    ctx: CallContext = Depends(get_call_context),
    service: ListService = Depends(get_list_service),
) -> VocabularyList:
    """Rename a list (creator only)."""
    return service.update_list(list_id, body_field(body, "name"), ctx)


@router.delete("/{list_id}", response_model=DeleteResult)
async def delete_list(
    list_id: str,
    ctx: CallContext = Depends(get_call_context),
    service: ListService = Depends(get_list_service),
) -> DeleteResult:
    """Delete a list and every word it contains (creator only)."""
    return service.delete_list(list_id, ctx)


@router.get("/{list_id}/count", response_model=WordCount)
async def count_words(
    list_id: str,
    ctx: CallContext = Depends(get_call_context),
    service: ListService = Depends(get_list_service),
) -> WordCount:
    return WordCount(list_id=list_id, count=service.count_words(list_id, ctx))


@router.post("/{list_id}/words", response_model=Word, status_code=status.HTTP_201_CREATED)
async def add_word(
    list_id: str,
    body: Any = Body(None),
    ctx: CallContext = Depends(get_call_context),
    service: WordService = Depends(get_word_service),
) -> Word:
    """Add a word to the caller's list."""
    return service.add_word(list_id, body, ctx)


@router.get("/{list_id}/words/{word_id}", response_model=Word)
async def get_word(
    list_id: str,
    word_id: str,
    ctx: CallContext = Depends(get_call_context),
    service: WordService = Depends(get_word_service),
) -> Word:
    return service.get_word(list_id, word_id, ctx)


@router.put("/{list_id}/words/{word_id}", response_model=Word)
async def update_word(
    list_id: str,
    word_id: str,
    body: Any = Body(None),
    ctx: CallContext = Depends(get_call_context),
    service: WordService = Depends(get_word_service),
) -> Word:
    """Replace a word's text, meaning and difficulty."""
    return service.update_word(list_id, word_id, body, ctx)


@router.delete("/{list_id}/words/{word_id}", response_model=DeleteResult)
async def delete_word(
    list_id: str,
    word_id: str,
    ctx: CallContext = Depends(get_call_context),
    service: WordService = Depends(get_word_service),
) -> DeleteResult:
    return service.delete_word(list_id, word_id, ctx)
