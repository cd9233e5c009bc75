from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Flashcard(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str = Field(min_length=1, description="Question side of the card.")
    answer: str = Field(min_length=1, description="Answer side of the card.")


class Flashcards(BaseModel):
    flashcards: list[Flashcard] = Field(default_factory=list)
