from __future__ import annotations

import pytest
from pydantic import ValidationError

from aiutilities.core.config import Settings


def test_defaults_without_environment(monkeypatch):
    for name in ("LLM_PROVIDER", "FRONTEND_ORIGINS", "UPLOAD_MAX_SIZE_BYTES"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.llm_provider == "openai"
    assert settings.upload_max_size_bytes == 20 * 1024 * 1024
    assert settings.frontend_origin_list == ["http://localhost:3000"]


def test_values_are_read_from_environment(monkeypatch):
    monkeypatch.setenv("LLM_PROVIDER", "gemini")
    monkeypatch.setenv("FRONTEND_ORIGINS", "http://a.test, http://b.test ,")
    monkeypatch.setenv("UPLOAD_MAX_SIZE_BYTES", "1024")

    settings = Settings(_env_file=None)

    assert settings.llm_provider == "gemini"
    assert settings.frontend_origin_list == ["http://a.test", "http://b.test"]
    assert settings.upload_max_size_bytes == 1024


def test_wildcard_origin_is_kept_as_single_entry():
    settings = Settings(_env_file=None, FRONTEND_ORIGINS=" * ")

    assert settings.frontend_origin_list == ["*"]


def test_unknown_provider_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LLM_PROVIDER="unknown")
