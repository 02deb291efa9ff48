"""Word list loading and validation."""

from .models import ValidationError, ValidationResult, WordLists
from .lists import (
    WordListError,
    read_word_list,
    validate_words,
    validate_word_list,
    check_subset,
    load_word_lists,
)
from .data import FINAL, ACCEPTABLE

__all__ = [
    # Models
    "ValidationError",
    "ValidationResult",
    "WordLists",
    # Loading and validation
    "WordListError",
    "read_word_list",
    "validate_words",
    "validate_word_list",
    "check_subset",
    "load_word_lists",
    # Built-in lists
    "FINAL",
    "ACCEPTABLE",
]
