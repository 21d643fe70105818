"""
Word endpoints for API v1.

The listings are public to every authenticated client.  Changing a
word's difficulty is addressed by word id and allowed only to the
word's creator.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends

from vocabulary_api.app.api.deps import body_field, get_word_service
from vocabulary_api.app.core.context import CallContext
from vocabulary_api.app.core.security import get_call_context, get_current_user
from vocabulary_api.app.schemas.word import Word
from vocabulary_api.app.services import WordService

router = APIRouter()


@router.get("/", response_model=List[Word])
async def list_words(
    current_user: dict = Depends(get_current_user),
    service: WordService = Depends(get_word_service),
) -> List[Word]:
    return service.list_all_words()


@router.get("/initial", response_model=List[Word])
async def list_initial_words(
    current_user: dict = Depends(get_current_user),
    service: WordService = Depends(get_word_service),
) -> List[Word]:
    """Return the first few words of the store."""
    return service.list_initial_words()


@router.get("/difficulty/{difficulty}", response_model=List[Word])
async def list_words_by_difficulty(
    difficulty: int,
    current_user: dict = Depends(get_current_user),
    service: WordService = Depends(get_word_service),
) -> List[Word]:
    """Return every word whose difficulty equals ``difficulty``."""
    return service.list_words_by_difficulty(difficulty)


@router.patch("/{word_id}/difficulty", response_model=Word)
async def change_difficulty(
    word_id: str,
    body: Any = Body(None),
    ctx: CallContext = Depends(get_call_context),
    service: WordService = Depends(get_word_service),
) -> Word:
    """Change a word's difficulty (word creator only)."""
    return service.change_difficulty(word_id, body_field(body, "difficulty"), ctx)
