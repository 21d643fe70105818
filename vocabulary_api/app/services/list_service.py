"""
Business logic for vocabulary lists.

Lists are private to their creator: reading, renaming, counting and
deleting a list all require the caller to be its creator.  Listing
every list is public.  Deleting a list also deletes the words it
contains from the word store, through ``WordService``.
"""

import logging
from typing import Any, List, Optional

from ..core.context import CallContext, IdFactory, new_record_id
from ..core.db import RecordStore, get_list_store, get_word_store
from ..schemas.vocabulary_list import DeleteResult, ListName, VocabularyList
from .ownership import load_owned_list, parse_payload
from .word_service import WordService

logger = logging.getLogger(__name__)


class ListService:
    """Service for creating and managing vocabulary lists."""

    def __init__(
        self,
        list_store: Optional[RecordStore] = None,
        word_store: Optional[RecordStore] = None,
        id_factory: IdFactory = new_record_id,
        word_service: Optional[WordService] = None,
    ) -> None:
        self.list_store = list_store if list_store is not None else get_list_store()
        self.word_store = word_store if word_store is not None else get_word_store()
        self.id_factory = id_factory
        self.word_service = word_service or WordService(
            word_store=self.word_store,
            list_store=self.list_store,
            id_factory=id_factory,
        )

    def create_list(self, name: Any, ctx: CallContext) -> VocabularyList:
        """Create an empty list owned by the caller."""
        data = parse_payload(ListName, {"name": name})
        vocab_list = VocabularyList(
            id=self.id_factory(),
            name=data.name,
            words=[],
            creator=ctx.caller,
            created_at=ctx.now,
            updated_at=None,
        )
        self.list_store.insert(vocab_list.id, vocab_list)
        logger.info("Caller %s created list %s", ctx.caller, vocab_list.id)
        return vocab_list

    def update_list(self, list_id: str, name: Any, ctx: CallContext) -> VocabularyList:
        """Rename a list."""
        data = parse_payload(ListName, {"name": name})
        vocab_list = load_owned_list(self.list_store, list_id, ctx)
        vocab_list.name = data.name
        vocab_list.updated_at = ctx.now
        self.list_store.insert(vocab_list.id, vocab_list)
        logger.info("Caller %s renamed list %s", ctx.caller, list_id)
        return vocab_list

    def get_list(self, list_id: str, ctx: CallContext) -> VocabularyList:
        return load_owned_list(self.list_store, list_id, ctx)

    def delete_list(self, list_id: str, ctx: CallContext) -> DeleteResult:
        """Delete a list together with every word it contains."""
        vocab_list = load_owned_list(self.list_store, list_id, ctx)
        removed = self.word_service.remove_words(vocab_list.words)
        self.list_store.remove(list_id)
        logger.info("Caller %s deleted list %s and %s words", ctx.caller, list_id, removed)
        return DeleteResult(
            id=list_id,
            message=f"List with id={list_id} deleted successfully",
            deleted_words=removed,
        )

    def list_all_lists(self) -> List[VocabularyList]:
        return self.list_store.values()

    def count_words(self, list_id: str, ctx: CallContext) -> int:
        return len(load_owned_list(self.list_store, list_id, ctx).words)
