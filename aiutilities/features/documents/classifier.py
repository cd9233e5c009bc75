from __future__ import annotations

from .errors import ClassificationError
from .types import MediaType

_DECLARED_MEDIA_TYPES = {media_type.value: media_type for media_type in MediaType}

# Checked in order; suffix matching is case-sensitive.
_SUFFIX_MEDIA_TYPES: tuple[tuple[tuple[str, ...], MediaType], ...] = (
    ((".jpg", ".jpeg"), MediaType.IMAGE_JPEG),
    ((".gif",), MediaType.IMAGE_GIF),
    ((".png",), MediaType.IMAGE_PNG),
    ((".pdf",), MediaType.PDF),
)


def media_type_from_filename(filename: str | None) -> MediaType | None:
    if not filename:
        return None
    for suffixes, media_type in _SUFFIX_MEDIA_TYPES:
        if filename.endswith(suffixes):
            return media_type
    return None


def classify(declared_type: str | None, filename: str | None) -> MediaType:
    """Resolve the media type of an upload.

    A recognised declared MIME type always wins; the filename suffix is only a
    fallback for missing or unrecognised declarations.
    """
    if declared_type is not None:
        declared = _DECLARED_MEDIA_TYPES.get(declared_type)
        if declared is not None:
            return declared

    from_name = media_type_from_filename(filename)
    if from_name is not None:
        return from_name

    raise ClassificationError(declared_type)
