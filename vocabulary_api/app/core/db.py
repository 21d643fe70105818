"""
Record storage and SQLite integration.

The services persist two independent maps, one for words and one for
vocabulary lists, each keyed by the record's own identifier.  Both are
accessed through the small ``RecordStore`` interface defined here:
point lookup, upsert, delete and iteration over all values in
ascending key order.

Two backends exist.  ``MemoryRecordStore`` keeps records in a dict and
is used by tests and by ``STORAGE_BACKEND=memory``.
``SQLiteRecordStore`` keeps every map in the shared ``records`` table of
the SQLite file named by ``settings.database_url``; records are stored
as JSON produced by their pydantic model.

The schema is managed by a simple migration mechanism: applied
versions are stored in the ``migrations`` table and new migrations are
executed in order by ``init_db``.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Generic, Iterator, List, Optional, Type, TypeVar

from pydantic import BaseModel

from .config import settings

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=BaseModel)

WORDS_NAMESPACE = "words"
LISTS_NAMESPACE = "lists"

MIGRATIONS: List[tuple] = [
    # Migration 1: key/value table shared by both record maps
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS records (
            namespace TEXT NOT NULL,
            key TEXT NOT NULL,
            value TEXT NOT NULL,
            PRIMARY KEY (namespace, key)
        );
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used directly; relative paths are resolved
    against the project root (the directory holding ``vocabulary_api``).
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection with name-indexed rows."""
    conn = sqlite3.connect(db_path or get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: Optional[str] = None) -> None:
    """Create the database file if needed and apply pending migrations."""
    with get_cursor(db_path) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied database migration %s", version)
                current_version = version


class RecordStore(Generic[V]):
    """Ordered map from string identifier to a record.

    Absence is reported as ``None`` by :meth:`get`; no method raises for
    a missing key.
    """

    def get(self, key: str) -> Optional[V]:
        raise NotImplementedError

    def insert(self, key: str, value: V) -> None:
        """Insert ``value`` under ``key``, replacing any previous record."""
        raise NotImplementedError

    def remove(self, key: str) -> None:
        """Remove ``key``; does nothing when it is absent."""
        raise NotImplementedError

    def values(self) -> List[V]:
        """Return every record in ascending key order."""
        raise NotImplementedError


class MemoryRecordStore(RecordStore[V]):
    """Dict-backed store.

    Records are copied on the way in and out so callers never share
    state with the store, as with a persistent backend.
    """

    def __init__(self) -> None:
        self._records: Dict[str, V] = {}

    def get(self, key: str) -> Optional[V]:
        record = self._records.get(key)
        return record.model_copy(deep=True) if record is not None else None

    def insert(self, key: str, value: V) -> None:
        self._records[key] = value.model_copy(deep=True)

    def remove(self, key: str) -> None:
        self._records.pop(key, None)

    def values(self) -> List[V]:
        return [self._records[key].model_copy(deep=True) for key in sorted(self._records)]


class SQLiteRecordStore(RecordStore[V]):
    """Store one record map inside the shared ``records`` table."""

    def __init__(self, namespace: str, model: Type[V], db_path: Optional[str] = None) -> None:
        self.namespace = namespace
        self.model = model
        self.db_path = db_path

    def get(self, key: str) -> Optional[V]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT value FROM records WHERE namespace = ? AND key = ?",
                (self.namespace, key),
            ).fetchone()
        if not row:
            return None
        return self.model.model_validate_json(row["value"])

    def insert(self, key: str, value: V) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "INSERT OR REPLACE INTO records (namespace, key, value) VALUES (?, ?, ?)",
                (self.namespace, key, value.model_dump_json()),
            )

    def remove(self, key: str) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "DELETE FROM records WHERE namespace = ? AND key = ?",
                (self.namespace, key),
            )

    def values(self) -> List[V]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                "SELECT value FROM records WHERE namespace = ? ORDER BY key ASC",
                (self.namespace,),
            ).fetchall()
        return [self.model.model_validate_json(row["value"]) for row in rows]


_stores: Dict[str, RecordStore] = {}


def _get_store(namespace: str, model: Type[V]) -> RecordStore[V]:
    store = _stores.get(namespace)
    if store is None:
        if settings.storage_backend == "memory":
            store = MemoryRecordStore()
        else:
            store = SQLiteRecordStore(namespace, model)
        _stores[namespace] = store
    return store


def get_word_store() -> RecordStore:
    """Return the process-wide word store."""
    from vocabulary_api.app.schemas.word import Word

    return _get_store(WORDS_NAMESPACE, Word)


def get_list_store() -> RecordStore:
    """Return the process-wide vocabulary list store."""
    from vocabulary_api.app.schemas.vocabulary_list import VocabularyList

    return _get_store(LISTS_NAMESPACE, VocabularyList)
