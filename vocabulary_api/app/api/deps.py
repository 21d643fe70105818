"""
FastAPI dependencies that provide service instances.

Services are built per request on top of the process-wide record
stores.  Tests replace these providers through
``app.dependency_overrides``.
"""

from typing import Any

from vocabulary_api.app.services import ListService, WordService


def body_field(body: Any, key: str) -> Any:
    """Return ``body[key]`` for an object body, otherwise ``None``."""
    if isinstance(body, dict):
        return body.get(key)
    return None


def get_list_service() -> ListService:
    return ListService()


def get_word_service() -> WordService:
    return WordService()
