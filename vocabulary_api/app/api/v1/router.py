"""
Top-level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, update this file to include them.
"""

from fastapi import APIRouter

from .endpoints import lists, words

router = APIRouter()

router.include_router(lists.router, prefix="/lists", tags=["lists"])
router.include_router(words.router, prefix="/words", tags=["words"])
