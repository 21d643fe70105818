"""
Business logic for vocabulary words.

Every word belongs to exactly one vocabulary list.  Its canonical copy
is kept in the word store and a full copy is embedded in the list's
``words`` sequence.  All writes of a word go through
``WordService._save_word`` which updates both locations together, so
the two copies are equal whenever an operation returns.

List-scoped operations authorise against the list's creator.
``change_difficulty`` is addressed by word id alone and authorises
against the word's own creator.  Listing operations are public.
"""

import logging
from typing import Any, Iterable, List, Optional

from ..core.config import settings
from ..core.context import CallContext, IdFactory, new_record_id
from ..core.db import RecordStore, get_list_store, get_word_store
from ..core.errors import NotFound
from ..schemas.vocabulary_list import DeleteResult, VocabularyList
from ..schemas.word import DifficultyUpdate, Word, WordPayload
from .ownership import WORD_ENTITY, ensure_owner, load_owned_list, parse_payload

logger = logging.getLogger(__name__)


class WordService:
    """Service for words and their embedded copies inside lists."""

    def __init__(
        self,
        word_store: Optional[RecordStore] = None,
        list_store: Optional[RecordStore] = None,
        id_factory: IdFactory = new_record_id,
        initial_words: Optional[int] = None,
    ) -> None:
        self.word_store = word_store if word_store is not None else get_word_store()
        self.list_store = list_store if list_store is not None else get_list_store()
        self.id_factory = id_factory
        self.initial_words = initial_words if initial_words is not None else settings.initial_words

    # ------------------------------------------------------------------
    # List-scoped operations
    # ------------------------------------------------------------------
    def add_word(self, list_id: str, payload: Any, ctx: CallContext) -> Word:
        """Create a word and append it to the caller's list."""
        vocab_list = load_owned_list(self.list_store, list_id, ctx)
        data = parse_payload(WordPayload, payload)
        word = Word(
            id=self.id_factory(),
            word=data.word,
            meaning=data.meaning,
            difficulty=data.difficulty,
            creator=ctx.caller,
            created_at=ctx.now,
            updated_at=None,
        )
        self._save_word(vocab_list, word)
        logger.info("Caller %s added word %s to list %s", ctx.caller, word.id, list_id)
        return word

    def update_word(self, list_id: str, word_id: str, payload: Any, ctx: CallContext) -> Word:
        """Replace the text, meaning and difficulty of a word in a list.

        ``id``, ``creator`` and ``created_at`` are kept from the existing
        word.  A word that is not part of the list is reported as not
        found rather than created.
        """
        vocab_list = load_owned_list(self.list_store, list_id, ctx)
        data = parse_payload(WordPayload, payload)
        current = self._find_in_list(vocab_list, word_id)
        if current is None:
            raise NotFound(WORD_ENTITY, word_id, f"Word with id={word_id} not found in list {list_id}")
        word = current.model_copy(
            update={
                "word": data.word,
                "meaning": data.meaning,
                "difficulty": data.difficulty,
                "updated_at": ctx.now,
            }
        )
        self._save_word(vocab_list, word)
        logger.info("Caller %s updated word %s in list %s", ctx.caller, word_id, list_id)
        return word

    def delete_word(self, list_id: str, word_id: str, ctx: CallContext) -> DeleteResult:
        """Remove a word from a list and from the word store.

        Neither removal fails when the word is already gone.  The
        canonical record is kept while another list still embeds it.
        """
        vocab_list = load_owned_list(self.list_store, list_id, ctx)
        vocab_list.words = [word for word in vocab_list.words if word.id != word_id]
        self.list_store.insert(vocab_list.id, vocab_list)
        existed = False
        other_list = self._find_owning_list(word_id)
        if other_list is not None:
            logger.warning(
                "Word %s is still embedded in list %s; keeping its canonical record",
                word_id,
                other_list.id,
            )
        elif self.word_store.get(word_id) is not None:
            existed = True
            self.word_store.remove(word_id)
        logger.info("Caller %s deleted word %s from list %s", ctx.caller, word_id, list_id)
        return DeleteResult(
            id=word_id,
            message=f"Word with id={word_id} deleted successfully",
            deleted_words=1 if existed else 0,
        )

    def get_word(self, list_id: str, word_id: str, ctx: CallContext) -> Word:
        vocab_list = load_owned_list(self.list_store, list_id, ctx)
        word = self._find_in_list(vocab_list, word_id)
        if word is None:
            raise NotFound(WORD_ENTITY, word_id, f"Word with id={word_id} not found in list {list_id}")
        return word

    # ------------------------------------------------------------------
    # Word-scoped operations
    # ------------------------------------------------------------------
    def change_difficulty(self, word_id: str, difficulty: Any, ctx: CallContext) -> Word:
        """Set a word's difficulty, authorised against the word's creator.

        The embedded copy inside the owning list is updated as well.
        """
        data = parse_payload(DifficultyUpdate, {"difficulty": difficulty})
        current = self.word_store.get(word_id)
        if current is None:
            raise NotFound(WORD_ENTITY, word_id)
        ensure_owner(current.creator, ctx, WORD_ENTITY, word_id)
        word = current.model_copy(update={"difficulty": data.difficulty, "updated_at": ctx.now})
        owner_list = self._find_owning_list(word_id)
        if owner_list is None:
            logger.warning("Word %s has no owning list; updating canonical copy only", word_id)
            self.word_store.insert(word.id, word)
        else:
            self._save_word(owner_list, word)
        logger.info("Caller %s set difficulty of word %s to %s", ctx.caller, word_id, data.difficulty)
        return word

    def remove_words(self, words: Iterable[Word]) -> int:
        """Drop the canonical copies of ``words``; returns how many were removed."""
        removed = 0
        for word in words:
            if self.word_store.get(word.id) is not None:
                self.word_store.remove(word.id)
                removed += 1
        return removed

    # ------------------------------------------------------------------
    # Public listings
    # ------------------------------------------------------------------
    def list_initial_words(self) -> List[Word]:
        return self.word_store.values()[: self.initial_words]

    def list_all_words(self) -> List[Word]:
        return self.word_store.values()

    def list_words_by_difficulty(self, difficulty: Any) -> List[Word]:
        wanted = parse_payload(DifficultyUpdate, {"difficulty": difficulty}).difficulty
        return [word for word in self.word_store.values() if word.difficulty == wanted]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _save_word(self, vocab_list: VocabularyList, word: Word) -> None:
        """Write ``word`` to the word store and into ``vocab_list``.

        An embedded word with the same id is replaced in place; otherwise
        the word is appended.  The list is persisted afterwards.
        """
        words = []
        replaced = False
        for existing in vocab_list.words:
            if existing.id == word.id:
                words.append(word)
                replaced = True
            else:
                words.append(existing)
        if not replaced:
            words.append(word)
        vocab_list.words = words
        self.word_store.insert(word.id, word)
        self.list_store.insert(vocab_list.id, vocab_list)

    @staticmethod
    def _find_in_list(vocab_list: VocabularyList, word_id: str) -> Optional[Word]:
        for word in vocab_list.words:
            if word.id == word_id:
                return word
        return None

    def _find_owning_list(self, word_id: str) -> Optional[VocabularyList]:
        for vocab_list in self.list_store.values():
            if self._find_in_list(vocab_list, word_id) is not None:
                return vocab_list
        return None
