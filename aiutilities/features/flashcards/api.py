from __future__ import annotations

from fastapi import APIRouter, Depends, File, Response, UploadFile

from aiutilities.core.config import get_settings
from aiutilities.features.pipeline import DocumentPipeline
from aiutilities.features.pipeline.dependencies import get_document_pipeline
from aiutilities.features.shared.errors import PIPELINE_ERROR_RESPONSES
from aiutilities.features.shared.uploads import receive_upload

from .service import create_flashcards, create_flashcards_csv
from .types import Flashcard

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"
CSV_FILENAME = "flashcards.csv"

router = APIRouter(prefix="/api", tags=["flashcards"])


@router.post("/flashcards", response_model=list[Flashcard], responses=PIPELINE_ERROR_RESPONSES)
async def post_flashcards(
    file: UploadFile | None = File(default=None),
    pipeline: DocumentPipeline = Depends(get_document_pipeline),
) -> list[Flashcard]:
    upload = await receive_upload(file, max_size=get_settings().upload_max_size_bytes)
    return await create_flashcards(upload, pipeline=pipeline)


@router.post("/flashcards/csv", response_class=Response, responses=PIPELINE_ERROR_RESPONSES)
async def post_flashcards_csv(
    file: UploadFile | None = File(default=None),
    pipeline: DocumentPipeline = Depends(get_document_pipeline),
) -> Response:
    upload = await receive_upload(file, max_size=get_settings().upload_max_size_bytes)
    payload = await create_flashcards_csv(upload, pipeline=pipeline)
    return Response(
        content=payload,
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )
