from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile

from aiutilities.core.config import get_settings
from aiutilities.features.pipeline import DocumentPipeline
from aiutilities.features.pipeline.dependencies import get_document_pipeline
from aiutilities.features.shared.errors import PIPELINE_ERROR_RESPONSES
from aiutilities.features.shared.uploads import receive_upload

from .service import analyze_cv
from .types import CVData

router = APIRouter(prefix="/api", tags=["cv"])


@router.post(
    "/analyzeCV",
    response_model=CVData,
    summary="Analyze CV",
    description="Analyze any CV and get a breakdown of its content in json",
    responses=PIPELINE_ERROR_RESPONSES,
)
async def post_analyze_cv(
    file: UploadFile | None = File(default=None),
    pipeline: DocumentPipeline = Depends(get_document_pipeline),
) -> CVData:
    upload = await receive_upload(file, max_size=get_settings().upload_max_size_bytes)
    return await analyze_cv(upload, pipeline=pipeline)
