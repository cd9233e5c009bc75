from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from langchain_openai import ChatOpenAI

from aiutilities.core.config import LLMProvider, Settings, get_settings


@dataclass(frozen=True)
class ModelSpec:
    name: str
    build_model: Callable[[], Any]


def openai_model_spec(settings: Settings) -> ModelSpec:
    def _build_model() -> ChatOpenAI:
        return ChatOpenAI(
            model=settings.openai_model,
            api_key=settings.openai_api_key or None,
            temperature=settings.llm_temperature,
        )

    return ModelSpec(name=settings.openai_model, build_model=_build_model)


def openailike_model_spec(settings: Settings) -> ModelSpec:
    def _build_model() -> ChatOpenAI:
        model_kwargs: dict[str, Any] = {
            "model": settings.openailike_model,
            "api_key": settings.openailike_api_key or None,
            "temperature": settings.llm_temperature,
        }
        if settings.openailike_base_url:
            # OpenAI-compatible providers often need a custom base URL.
            model_kwargs["base_url"] = settings.openailike_base_url
        return ChatOpenAI(**model_kwargs)

    return ModelSpec(name=settings.openailike_model, build_model=_build_model)


def gemini_model_spec(settings: Settings) -> ModelSpec:
    def _build_model() -> Any:
        # Import lazily so non-Gemini deployments do not pay for the SDK import.
        from langchain_google_genai import ChatGoogleGenerativeAI

        return ChatGoogleGenerativeAI(
            model=settings.gemini_model,
            api_key=settings.google_api_key or None,
            temperature=settings.llm_temperature,
        )

    return ModelSpec(name=settings.gemini_model, build_model=_build_model)


_MODEL_SPEC_BUILDERS: dict[LLMProvider, Callable[[Settings], ModelSpec]] = {
    "openai": openai_model_spec,
    "openailike": openailike_model_spec,
    "gemini": gemini_model_spec,
}


def resolve_model_spec(settings: Settings | None = None) -> ModelSpec:
    resolved = settings or get_settings()
    return _MODEL_SPEC_BUILDERS[resolved.llm_provider](resolved)
