from __future__ import annotations

from aiutilities.features.shared.errors import DocumentPipelineError, FailureKind


MODEL_CALL_FAILED = "model call failed"


class GenerationError(DocumentPipelineError):
    kind = FailureKind.GENERATION_FAILED
    status_code = 502

    def __init__(self, cause: str) -> None:
        super().__init__(f"Structured generation failed: {cause}")
        self.cause = cause
