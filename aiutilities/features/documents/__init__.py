from __future__ import annotations

from .classifier import classify, media_type_from_filename
from .errors import ClassificationError, ExtractionError
from .extractor import extract, image_to_resource, pdf_to_text
from .types import ExtractedContent, ImageResource, MediaType, TextDocument, UploadedFile

__all__ = [
    "ClassificationError",
    "ExtractedContent",
    "ExtractionError",
    "ImageResource",
    "MediaType",
    "TextDocument",
    "UploadedFile",
    "classify",
    "extract",
    "image_to_resource",
    "media_type_from_filename",
    "pdf_to_text",
]
