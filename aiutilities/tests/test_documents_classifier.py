from __future__ import annotations

import pytest

from aiutilities.features.documents import ClassificationError, MediaType, classify
from aiutilities.features.shared.errors import FailureKind


@pytest.mark.parametrize(
    ("declared", "expected"),
    [
        ("image/jpeg", MediaType.IMAGE_JPEG),
        ("image/gif", MediaType.IMAGE_GIF),
        ("image/png", MediaType.IMAGE_PNG),
        ("application/pdf", MediaType.PDF),
    ],
)
def test_declared_type_wins_over_filename(declared, expected):
    assert classify(declared, "resume.docx") == expected
    assert classify(declared, "photo.png") == expected
    assert classify(declared, "notes.pdf") == expected
    assert classify(declared, None) == expected


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("holiday.jpg", MediaType.IMAGE_JPEG),
        ("holiday.jpeg", MediaType.IMAGE_JPEG),
        ("loop.gif", MediaType.IMAGE_GIF),
        ("photo.png", MediaType.IMAGE_PNG),
        ("notes.pdf", MediaType.PDF),
    ],
)
def test_filename_suffix_used_when_declared_type_missing_or_unrecognized(filename, expected):
    assert classify(None, filename) == expected
    assert classify("application/octet-stream", filename) == expected
    assert classify("image/webp", filename) == expected


def test_suffix_only_matches_at_end_of_name():
    assert classify(None, "archive.pdf.png") == MediaType.IMAGE_PNG
    with pytest.raises(ClassificationError):
        classify(None, "photo.png.bak")


def test_unsupported_file_is_rejected_as_invalid_file_type():
    with pytest.raises(ClassificationError) as exc_info:
        classify(None, "resume.docx")

    error = exc_info.value
    assert error.kind is FailureKind.INVALID_FILE_TYPE
    assert error.client_fault is True
    assert error.reason == "unsupported or undetermined file type"
    assert error.observed_declared_type is None
    assert str(error) == "Invalid File Type: None"


def test_rejection_carries_observed_declared_type():
    with pytest.raises(ClassificationError) as exc_info:
        classify("application/msword", "resume.doc")
    assert exc_info.value.observed_declared_type == "application/msword"
    assert "application/msword" in exc_info.value.message


def test_missing_declared_type_and_filename_is_rejected():
    with pytest.raises(ClassificationError):
        classify(None, None)
    with pytest.raises(ClassificationError):
        classify("", "")


@pytest.mark.parametrize("filename", ["photo.PNG", "scan.JPG", "notes.Pdf", "loop.GIF"])
def test_suffix_matching_is_case_sensitive(filename):
    with pytest.raises(ClassificationError):
        classify(None, filename)


def test_declared_type_matching_is_exact():
    # Parameters or different casing are not recognised, so the filename decides.
    assert classify("IMAGE/PNG", "scan.pdf") == MediaType.PDF
    with pytest.raises(ClassificationError):
        classify("image/png; charset=binary", "upload")


def test_only_pdf_is_routed_to_text_extraction():
    assert [media_type for media_type in MediaType if not media_type.is_image] == [MediaType.PDF]
