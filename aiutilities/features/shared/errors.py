from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class FailureKind(str, Enum):
    INVALID_FILE_TYPE = "InvalidFileType"
    EXTRACTION_FAILED = "ExtractionFailed"
    GENERATION_FAILED = "GenerationFailed"
    SERIALIZATION_FAILED = "SerializationFailed"


class DocumentPipelineError(Exception):
    """Base exception for every failure a document pipeline can end in.

    ``kind`` is the stable, machine-readable name rendered to clients and
    ``client_fault`` tells the HTTP layer whether the upload itself was bad.
    """

    kind: FailureKind
    client_fault: bool = False
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    error: str
    message: str
    path: str


PIPELINE_ERROR_RESPONSES: dict[int | str, dict] = {
    422: {"model": ErrorResponse, "description": "File Error"},
    502: {"model": ErrorResponse, "description": "Model Error"},
}


__all__ = [
    "DocumentPipelineError",
    "ErrorResponse",
    "FailureKind",
    "PIPELINE_ERROR_RESPONSES",
]
