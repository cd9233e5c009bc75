from __future__ import annotations

import base64
import logging
from typing import Any, Protocol, TypeVar, assert_never

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel, ValidationError

from aiutilities.features.documents.types import ExtractedContent, ImageResource, TextDocument

from .errors import MODEL_CALL_FAILED, GenerationError
from .models import ModelSpec, resolve_model_spec

SchemaT = TypeVar("SchemaT", bound=BaseModel)

logger = logging.getLogger(__name__)


class StructuredGenerationClient(Protocol):
    async def generate(
        self,
        schema: type[SchemaT],
        prompt_template: str,
        content: ExtractedContent,
    ) -> SchemaT: ...


def _content_blocks(content: ExtractedContent) -> list[dict[str, Any]]:
    match content:
        case TextDocument(text=text):
            return [{"type": "text", "text": f"Document text:\n{text}"}]
        case ImageResource(data=data, media_type=media_type):
            return [
                {
                    "type": "image",
                    "base64": base64.b64encode(data).decode("ascii"),
                    "mime_type": media_type.value,
                }
            ]
        case _:
            assert_never(content)


def build_messages(prompt_template: str, content: ExtractedContent) -> list[BaseMessage]:
    return [
        SystemMessage(content=prompt_template),
        HumanMessage(content=_content_blocks(content)),
    ]


def _coerce_result(schema: type[SchemaT], result: Any) -> SchemaT:
    if isinstance(result, schema):
        return result
    if result is None:
        raise GenerationError("model returned no structured output")
    try:
        return schema.model_validate(result)
    except ValidationError as exc:
        raise GenerationError(f"response did not match {schema.__name__}: {exc}") from exc


class LangChainGenerationClient:
    """Structured generation through a LangChain chat model.

    One ``ainvoke`` per call; retries and timeouts belong to the chat model's
    own configuration.
    """

    def __init__(self, model_spec: ModelSpec) -> None:
        self._model_spec = model_spec
        self._model: Any | None = None

    @property
    def model_name(self) -> str:
        return self._model_spec.name

    def _get_model(self) -> Any:
        if self._model is None:
            self._model = self._model_spec.build_model()
        return self._model

    async def generate(
        self,
        schema: type[SchemaT],
        prompt_template: str,
        content: ExtractedContent,
    ) -> SchemaT:
        messages = build_messages(prompt_template, content)
        try:
            runnable = self._get_model().with_structured_output(schema)
            result = await runnable.ainvoke(messages)
        except Exception as exc:
            logger.warning(
                "Structured generation with %s failed for schema %s.",
                self.model_name,
                schema.__name__,
                exc_info=True,
            )
            raise GenerationError(MODEL_CALL_FAILED) from exc
        return _coerce_result(schema, result)


_client_instance: LangChainGenerationClient | None = None


def get_generation_client() -> StructuredGenerationClient:
    global _client_instance
    if _client_instance is None:
        _client_instance = LangChainGenerationClient(resolve_model_spec())
    return _client_instance
