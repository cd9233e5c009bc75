from __future__ import annotations

from aiutilities.features.documents import UploadedFile
from aiutilities.features.pipeline import DocumentPipeline, UseCase

from .prompts import CV_ANALYSIS_PROMPT
from .types import CVData

CV_ANALYSIS_USE_CASE: UseCase[CVData] = UseCase(
    name="cv_analysis",
    schema=CVData,
    prompt_template=CV_ANALYSIS_PROMPT,
)


async def analyze_cv(upload: UploadedFile, *, pipeline: DocumentPipeline) -> CVData:
    result = await pipeline.run(upload, CV_ANALYSIS_USE_CASE)
    return result.record
