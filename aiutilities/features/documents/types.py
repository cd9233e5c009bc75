from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class MediaType(str, Enum):
    IMAGE_JPEG = "image/jpeg"
    IMAGE_GIF = "image/gif"
    IMAGE_PNG = "image/png"
    PDF = "application/pdf"

    @property
    def is_image(self) -> bool:
        return self is not MediaType.PDF


@dataclass(frozen=True)
class UploadedFile:
    content: bytes = field(repr=False)
    declared_media_type: str | None = None
    original_name: str | None = None

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ImageResource:
    data: bytes = field(repr=False)
    media_type: MediaType
    filename: str | None = None


@dataclass(frozen=True)
class TextDocument:
    text: str
    page_count: int


ExtractedContent = ImageResource | TextDocument
