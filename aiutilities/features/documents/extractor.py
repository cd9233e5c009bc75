from __future__ import annotations

import io
import logging
from typing import assert_never

from pypdf import PasswordType, PdfReader

from aiutilities.features.shared.text_sanitize import (
    CleanupStats,
    clean_extracted_text,
    log_cleanup_stats,
)

from .errors import ExtractionError
from .types import ExtractedContent, ImageResource, MediaType, TextDocument, UploadedFile

PAGE_SEPARATOR = "\n"

logger = logging.getLogger(__name__)


def image_to_resource(file: UploadedFile, media_type: MediaType) -> ImageResource:
    # Bytes are handed over untouched; the model provider validates the image.
    return ImageResource(
        data=file.content,
        media_type=media_type,
        filename=file.original_name,
    )


def _open_pdf(data: bytes) -> PdfReader:
    reader = PdfReader(io.BytesIO(data))
    if reader.is_encrypted and reader.decrypt("") == PasswordType.NOT_DECRYPTED:
        raise ExtractionError("PDF is password protected")
    return reader


def pdf_to_text(file: UploadedFile) -> TextDocument:
    try:
        reader = _open_pdf(file.content)
        page_texts = [page.extract_text() or "" for page in reader.pages]
    except ExtractionError:
        raise
    except Exception as exc:
        logger.warning(
            "PDF text extraction failed for %r.",
            file.original_name,
            exc_info=True,
        )
        raise ExtractionError(f"Could not parse PDF: {exc}") from exc

    stats = CleanupStats()
    cleaned_pages: list[str] = []
    for text in page_texts:
        cleaned, page_stats = clean_extracted_text(text)
        stats.merge(page_stats)
        cleaned_pages.append(cleaned)
    log_cleanup_stats(logger, location=f"documents.pdf_to_text.{file.original_name}", stats=stats)

    text = PAGE_SEPARATOR.join(cleaned_pages)
    if not text.strip():
        logger.warning(
            "No extractable text found in PDF %r (%d pages).",
            file.original_name,
            len(cleaned_pages),
        )
    return TextDocument(text=text, page_count=len(cleaned_pages))


def extract(file: UploadedFile, media_type: MediaType) -> ExtractedContent:
    match media_type:
        case MediaType.IMAGE_JPEG | MediaType.IMAGE_GIF | MediaType.IMAGE_PNG:
            return image_to_resource(file, media_type)
        case MediaType.PDF:
            return pdf_to_text(file)
        case _:
            assert_never(media_type)
