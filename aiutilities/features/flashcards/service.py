from __future__ import annotations

from typing import Iterable, Sequence

from aiutilities.features.documents import UploadedFile
from aiutilities.features.pipeline import DocumentPipeline, UseCase
from aiutilities.features.tabular import SerializationError, serialize_records

from .prompts import FLASHCARDS_PROMPT
from .types import Flashcard, Flashcards


def flashcard_rows(result: Flashcards) -> Iterable[tuple[str, str]]:
    return [(card.question, card.answer) for card in result.flashcards]


def serialize_flashcards(cards: Sequence[Flashcard]) -> bytes:
    return serialize_records(flashcard_rows(Flashcards(flashcards=list(cards))))


FLASHCARDS_USE_CASE: UseCase[Flashcards] = UseCase(
    name="flashcards",
    schema=Flashcards,
    prompt_template=FLASHCARDS_PROMPT,
)

FLASHCARDS_EXPORT_USE_CASE: UseCase[Flashcards] = UseCase(
    name="flashcards_export",
    schema=Flashcards,
    prompt_template=FLASHCARDS_PROMPT,
    to_rows=flashcard_rows,
)


async def create_flashcards(upload: UploadedFile, *, pipeline: DocumentPipeline) -> list[Flashcard]:
    result = await pipeline.run(upload, FLASHCARDS_USE_CASE)
    return list(result.record.flashcards)


async def create_flashcards_csv(upload: UploadedFile, *, pipeline: DocumentPipeline) -> bytes:
    result = await pipeline.run(upload, FLASHCARDS_EXPORT_USE_CASE)
    if result.payload is None:
        raise SerializationError(f"Use case {FLASHCARDS_EXPORT_USE_CASE.name} produced no export")
    return result.payload
