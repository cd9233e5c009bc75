from __future__ import annotations

from aiutilities.features.shared.errors import DocumentPipelineError, FailureKind


class SerializationError(DocumentPipelineError):
    kind = FailureKind.SERIALIZATION_FAILED
    status_code = 500
