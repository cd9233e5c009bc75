from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterable, Sequence, TypeVar

from pydantic import BaseModel

from aiutilities.features.documents.types import MediaType

RecordT = TypeVar("RecordT", bound=BaseModel)

RowBuilder = Callable[[RecordT], Iterable[Sequence[str]]]


class PipelineStage(str, Enum):
    RECEIVED = "received"
    CLASSIFIED = "classified"
    EXTRACTED = "extracted"
    GENERATED = "generated"
    SERIALIZED = "serialized"
    DONE = "done"


@dataclass(frozen=True)
class UseCase(Generic[RecordT]):
    """What a pipeline run asks the model for and how its answer leaves.

    ``to_rows`` turns the parsed record into tabular rows; leave it unset
    when the caller wants the record itself.
    """

    name: str
    schema: type[RecordT]
    prompt_template: str
    to_rows: RowBuilder[RecordT] | None = None


@dataclass(frozen=True)
class PipelineResult(Generic[RecordT]):
    record: RecordT
    media_type: MediaType
    stage: PipelineStage
    payload: bytes | None = None
