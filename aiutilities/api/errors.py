from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import JSONResponse

from aiutilities.features.shared.errors import DocumentPipelineError, ErrorResponse

logger = logging.getLogger(__name__)


async def document_pipeline_error_handler(request: Request, exc: DocumentPipelineError) -> JSONResponse:
    if not exc.client_fault:
        logger.error(
            "%s %s failed with %s: %s",
            request.method,
            request.url.path,
            exc.kind.value,
            exc.message,
        )
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=exc.status_code,
        error=exc.kind.value,
        message=exc.message,
        path=request.url.path,
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json"))
