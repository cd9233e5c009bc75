from __future__ import annotations

from fastapi import Depends

from aiutilities.features.generation import StructuredGenerationClient, get_generation_client

from .service import DocumentPipeline


def get_document_pipeline(
    client: StructuredGenerationClient = Depends(get_generation_client),
) -> DocumentPipeline:
    return DocumentPipeline(client)
