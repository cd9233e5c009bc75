from __future__ import annotations

from .client import (
    LangChainGenerationClient,
    StructuredGenerationClient,
    build_messages,
    get_generation_client,
)
from .errors import MODEL_CALL_FAILED, GenerationError
from .models import ModelSpec, resolve_model_spec

__all__ = [
    "MODEL_CALL_FAILED",
    "GenerationError",
    "LangChainGenerationClient",
    "ModelSpec",
    "StructuredGenerationClient",
    "build_messages",
    "get_generation_client",
    "resolve_model_spec",
]
