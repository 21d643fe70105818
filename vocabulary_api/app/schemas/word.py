"""
Pydantic schemas for vocabulary words.

A word is always created inside a vocabulary list.  Its canonical copy
lives in the word store and an identical copy is embedded in the
owning list.  ``creator`` and ``created_at`` are set once at creation;
``updated_at`` stays ``None`` until the first modification.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator


class WordPayload(BaseModel):
    """Caller-supplied fields for adding or replacing a word."""

    model_config = ConfigDict(extra="ignore")

    word: StrictStr = Field(..., description="The word itself")
    meaning: StrictStr = Field(..., description="Meaning or translation of the word")
    difficulty: StrictInt = Field(..., ge=0, description="Learner-assigned difficulty level")

    @field_validator("word")
    @classmethod
    def word_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Word must not be empty")
        return v


class DifficultyUpdate(BaseModel):
    """Body of a difficulty change."""

    difficulty: StrictInt = Field(..., ge=0)


class Word(BaseModel):
    """A word record as stored and returned by the API."""

    id: str
    word: str
    meaning: str
    difficulty: int
    creator: str
    created_at: int
    updated_at: Optional[int] = None
