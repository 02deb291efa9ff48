"""Data models for word list validation."""

from typing import List, Optional
from pydantic import BaseModel, Field


class ValidationError(BaseModel):
    """A single validation error."""
    code: str
    message: str
    word: Optional[str] = None
    line: Optional[int] = None


class ValidationResult(BaseModel):
    """Result of word list validation."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)


class WordLists(BaseModel):
    """The two word lists a game is played with."""
    final: List[str]
    acceptable: List[str]  # Sorted, searched by bisection
