"""
Word list loading and validation.

Validates:
1. The file exists and is a regular file
2. The list is not empty
3. Every word is made of exactly WORD_LENGTH latin letters
4. Every final (answer) word is also an acceptable guess
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..engine.models import WORD_LENGTH
from .models import ValidationError, ValidationResult, WordLists
from .data import FINAL, ACCEPTABLE

logger = logging.getLogger(__name__)

_WORD_PATTERN = re.compile(rf"^[A-Z]{{{WORD_LENGTH}}}$")


class WordListError(ValueError):
    """Raised when a word list is unusable; carries the validation result."""

    def __init__(self, result: ValidationResult, source: Optional[str] = None):
        self.result = result
        self.source = source
        message = result.errors[0].message if result.errors else "Invalid word list"
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


def read_word_list(path: Union[str, Path]) -> List[str]:
    """Read whitespace separated words from a file, uppercased."""
    text = Path(path).read_text(encoding="utf-8")
    return [word.upper() for word in text.split()]


def validate_words(words: Iterable[str]) -> ValidationResult:
    """Check that a list is non-empty and made of well-formed words."""
    words = list(words)
    errors: List[ValidationError] = []

    if not words:
        errors.append(ValidationError(
            code="EMPTY_LIST",
            message="Invalid word list: empty file",
        ))

    for i, word in enumerate(words, start=1):
        if not _WORD_PATTERN.match(word):
            errors.append(ValidationError(
                code="INVALID_WORD",
                message=f"Invalid word list: words should consist of {WORD_LENGTH} latin letters, got '{word}'",
                word=word,
                line=i,
            ))

    return ValidationResult(valid=not errors, errors=errors, words=words)


def validate_word_list(path: Union[str, Path]) -> ValidationResult:
    """
    Main validation function for a word list file.

    Returns a ValidationResult with:
    - valid: True if the file passes all checks
    - errors: List of validation errors
    - words: The uppercased words read from the file
    """
    path = Path(path)

    if not path.exists():
        return ValidationResult(valid=False, errors=[ValidationError(
            code="FILE_NOT_FOUND",
            message="File does not exist",
        )])

    if not path.is_file():
        return ValidationResult(valid=False, errors=[ValidationError(
            code="NOT_A_FILE",
            message="Not a file",
        )])

    return validate_words(read_word_list(path))


def check_subset(final: Iterable[str], acceptable: Iterable[str]) -> ValidationResult:
    """Every final word must be an acceptable guess."""
    acceptable_set = set(acceptable)
    errors = [
        ValidationError(
            code="NOT_SUBSET",
            message="Final words should be a subset of acceptable words!",
            word=word,
        )
        for word in final
        if word not in acceptable_set
    ]
    return ValidationResult(valid=not errors, errors=errors)


def load_word_lists(
    final_path: Optional[Union[str, Path]] = None,
    acceptable_path: Optional[Union[str, Path]] = None,
) -> WordLists:
    """
    Load the final and acceptable word lists.

    When only an acceptable list is given it also serves as the final list.
    Without either file the built-in lists are used.

    Raises:
        WordListError: If a file is invalid or final words are not acceptable
    """
    if acceptable_path is not None:
        result = validate_word_list(acceptable_path)
        if not result.valid:
            raise WordListError(result, str(acceptable_path))
        acceptable = result.words
    else:
        acceptable = list(ACCEPTABLE)

    if final_path is not None:
        result = validate_word_list(final_path)
        if not result.valid:
            raise WordListError(result, str(final_path))
        final = result.words
    elif acceptable_path is not None:
        final = list(acceptable)
    else:
        final = list(FINAL)

    subset = check_subset(final, acceptable)
    if not subset.valid:
        raise WordListError(subset)

    logger.debug("Loaded %d final and %d acceptable words", len(final), len(acceptable))
    return WordLists(final=final, acceptable=sorted(set(acceptable)))
