from __future__ import annotations

from aiutilities.features.shared.errors import DocumentPipelineError, FailureKind

UNSUPPORTED_FILE_TYPE_REASON = "unsupported or undetermined file type"


class ClassificationError(DocumentPipelineError):
    kind = FailureKind.INVALID_FILE_TYPE
    client_fault = True
    status_code = 422

    def __init__(self, observed_declared_type: str | None) -> None:
        super().__init__(f"Invalid File Type: {observed_declared_type}")
        self.reason = UNSUPPORTED_FILE_TYPE_REASON
        self.observed_declared_type = observed_declared_type


class ExtractionError(DocumentPipelineError):
    kind = FailureKind.EXTRACTION_FAILED
    client_fault = True
    status_code = 422

    def __init__(self, cause: str) -> None:
        super().__init__(f"Could not extract content: {cause}")
        self.cause = cause
