import itertools
import os

# Must be set before the application settings are first imported.
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest

from vocabulary_api.app.core.context import CallContext
from vocabulary_api.app.core.db import MemoryRecordStore
from vocabulary_api.app.services import ListService, WordService


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter):04d}"


@pytest.fixture
def word_store():
    return MemoryRecordStore()


@pytest.fixture
def list_store():
    return MemoryRecordStore()


@pytest.fixture
def word_service(word_store, list_store, id_factory):
    return WordService(word_store=word_store, list_store=list_store, id_factory=id_factory, initial_words=5)


@pytest.fixture
def list_service(word_store, list_store, id_factory, word_service):
    return ListService(
        list_store=list_store,
        word_store=word_store,
        id_factory=id_factory,
        word_service=word_service,
    )


@pytest.fixture
def alice():
    return CallContext(caller="alice", now=1_000)


@pytest.fixture
def bob():
    return CallContext(caller="bob", now=2_000)


@pytest.fixture
def later():
    """Build a context for ``caller`` at a later timestamp."""

    def _later(caller="alice", now=5_000):
        return CallContext(caller=caller, now=now)

    return _later
