from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

LLMProvider = Literal["openai", "openailike", "gemini"]


def _split_origins(raw: str) -> list[str]:
    if raw.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = Field(default="development", validation_alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    frontend_origins: str = Field(
        default="http://localhost:3000",
        validation_alias="FRONTEND_ORIGINS",
    )

    llm_provider: LLMProvider = Field(default="openai", validation_alias="LLM_PROVIDER")
    llm_temperature: float = Field(default=0.2, ge=0.0, le=2.0, validation_alias="LLM_TEMPERATURE")

    openai_api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4.1-mini", validation_alias="OPENAI_MODEL")

    openailike_api_key: str = Field(default="", validation_alias="OPENAILIKE_API_KEY")
    openailike_model: str = Field(default="", validation_alias="OPENAILIKE_MODEL")
    openailike_base_url: str = Field(default="", validation_alias="OPENAILIKE_BASE_URL")

    google_api_key: str = Field(default="", validation_alias="GOOGLE_API_KEY")
    gemini_model: str = Field(default="gemini-2.5-flash", validation_alias="GEMINI_MODEL")

    upload_max_size_bytes: int = Field(
        default=20 * 1024 * 1024,
        gt=0,
        validation_alias="UPLOAD_MAX_SIZE_BYTES",
    )

    @computed_field
    @property
    def frontend_origin_list(self) -> list[str]:
        return _split_origins(self.frontend_origins)


@lru_cache
def get_settings() -> Settings:
    return Settings()
