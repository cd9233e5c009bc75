from __future__ import annotations

FLASHCARDS_PROMPT = (
    "You turn study material into flashcards for spaced-repetition practice.\n"
    "Read the attached document (text or image) and write flashcards that cover its key facts, "
    "definitions and concepts.\n"
    "Rules:\n"
    "- Each flashcard has one focused question and a short, self-contained answer.\n"
    "- Keep the language of the source document.\n"
    "- Do not invent facts that are not in the document.\n"
    "- Keep the order in which topics appear in the document.\n"
    "Return the flashcards in the `flashcards` field."
)
