from __future__ import annotations

from .service import DocumentPipeline
from .types import PipelineResult, PipelineStage, UseCase

__all__ = [
    "DocumentPipeline",
    "PipelineResult",
    "PipelineStage",
    "UseCase",
]
