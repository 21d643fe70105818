"""
Pydantic schemas for vocabulary lists.

A list groups the words a learner adds to it.  ``words`` holds full
copies of those words, kept equal to their canonical records in the
word store after every word operation.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from .word import Word


class ListName(BaseModel):
    """Body for creating or renaming a list."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(..., description="Display name of the list")

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("List name must not be empty")
        return v


class VocabularyList(BaseModel):
    """A vocabulary list record with its embedded words."""

    id: str
    name: str
    words: List[Word] = Field(default_factory=list)
    creator: str
    created_at: int
    updated_at: Optional[int] = None


class WordCount(BaseModel):
    list_id: str
    count: int


class DeleteResult(BaseModel):
    """Confirmation returned by delete operations."""

    id: str
    message: str
    deleted_words: int = 0
