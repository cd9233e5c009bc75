from __future__ import annotations

from .service import (
    FLASHCARDS_EXPORT_USE_CASE,
    FLASHCARDS_USE_CASE,
    create_flashcards,
    create_flashcards_csv,
    flashcard_rows,
    serialize_flashcards,
)
from .types import Flashcard, Flashcards

__all__ = [
    "FLASHCARDS_EXPORT_USE_CASE",
    "FLASHCARDS_USE_CASE",
    "Flashcard",
    "Flashcards",
    "create_flashcards",
    "create_flashcards_csv",
    "flashcard_rows",
    "serialize_flashcards",
]
