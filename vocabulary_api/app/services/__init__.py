"""
Service layer.

``ListService`` and ``WordService`` hold the business rules: input
validation, ownership checks and keeping the embedded and canonical
copies of each word in step.  They work against any ``RecordStore``
so the HTTP layer and the tests can supply their own stores.
"""

from .list_service import ListService
from .word_service import WordService

__all__ = ["ListService", "WordService"]
