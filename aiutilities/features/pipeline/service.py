from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from aiutilities.features.documents import (
    ExtractedContent,
    ExtractionError,
    MediaType,
    UploadedFile,
    classify,
    extract,
)
from aiutilities.features.generation import (
    MODEL_CALL_FAILED,
    GenerationError,
    StructuredGenerationClient,
)
from aiutilities.features.shared.errors import DocumentPipelineError
from aiutilities.features.tabular import SerializationError, serialize_records

from .types import PipelineResult, PipelineStage, RecordT, RowBuilder, UseCase

Classifier = Callable[[str | None, str | None], MediaType]
Extractor = Callable[[UploadedFile, MediaType], ExtractedContent]
Serializer = Callable[[Iterable[Sequence[str]]], bytes]

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Classify, extract, generate and optionally serialize one upload.

    Stages run strictly in order and the first failure ends the run; nothing
    is retried here.
    """

    def __init__(
        self,
        client: StructuredGenerationClient,
        *,
        classifier: Classifier = classify,
        extractor: Extractor = extract,
        serializer: Serializer = serialize_records,
    ) -> None:
        self._client = client
        self._classifier = classifier
        self._extractor = extractor
        self._serializer = serializer

    def _extract(self, upload: UploadedFile, media_type: MediaType) -> ExtractedContent:
        try:
            return self._extractor(upload, media_type)
        except DocumentPipelineError:
            raise
        except Exception as exc:
            raise ExtractionError(str(exc) or type(exc).__name__) from exc

    async def _generate(self, use_case: UseCase[RecordT], content: ExtractedContent) -> RecordT:
        try:
            return await self._client.generate(use_case.schema, use_case.prompt_template, content)
        except DocumentPipelineError:
            raise
        except Exception as exc:
            logger.warning("Generation client for %s raised unexpectedly.", use_case.name, exc_info=True)
            raise GenerationError(MODEL_CALL_FAILED) from exc

    def _serialize(self, to_rows: RowBuilder[RecordT], record: RecordT) -> bytes:
        try:
            return self._serializer(to_rows(record))
        except DocumentPipelineError:
            raise
        except Exception as exc:
            raise SerializationError(f"Error converting to csv: {exc}") from exc

    async def run(self, upload: UploadedFile, use_case: UseCase[RecordT]) -> PipelineResult[RecordT]:
        stage = PipelineStage.RECEIVED
        logger.debug(
            "Pipeline %s received %r (declared=%s, size=%d).",
            use_case.name,
            upload.original_name,
            upload.declared_media_type,
            upload.size_bytes,
        )
        try:
            media_type = self._classifier(upload.declared_media_type, upload.original_name)
            stage = PipelineStage.CLASSIFIED
            logger.debug(
                "Pipeline %s classified upload as %s; using %s extraction.",
                use_case.name,
                media_type.value,
                "image" if media_type.is_image else "text",
            )

            content = self._extract(upload, media_type)
            stage = PipelineStage.EXTRACTED

            record = await self._generate(use_case, content)
            stage = PipelineStage.GENERATED

            payload: bytes | None = None
            if use_case.to_rows is not None:
                payload = self._serialize(use_case.to_rows, record)
                stage = PipelineStage.SERIALIZED
        except DocumentPipelineError as exc:
            logger.info(
                "Pipeline %s failed after stage %s with %s: %s",
                use_case.name,
                stage.value,
                exc.kind.value,
                exc.message,
            )
            raise

        logger.info(
            "Pipeline %s finished for %r (%s, final stage %s).",
            use_case.name,
            upload.original_name,
            media_type.value,
            stage.value,
        )
        return PipelineResult(
            record=record,
            media_type=media_type,
            stage=PipelineStage.DONE,
            payload=payload,
        )
