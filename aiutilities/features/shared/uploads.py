from __future__ import annotations

from fastapi import HTTPException, UploadFile

from aiutilities.features.documents import UploadedFile

_READ_CHUNK_SIZE = 1024 * 1024


async def _read_file_limited(upload: UploadFile, *, max_size: int) -> bytes:
    total = 0
    chunks: list[bytes] = []
    while True:
        chunk = await upload.read(_READ_CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > max_size:
            raise HTTPException(
                status_code=413,
                detail=f"File '{upload.filename or 'upload'}' exceeds max size of {max_size} bytes.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


async def receive_upload(upload: UploadFile | None, *, max_size: int) -> UploadedFile:
    if upload is None:
        raise HTTPException(status_code=400, detail="A file must be uploaded.")

    data = await _read_file_limited(upload, max_size=max_size)
    if not data:
        raise HTTPException(status_code=400, detail=f"File '{upload.filename or 'upload'}' is empty.")

    return UploadedFile(
        content=data,
        declared_media_type=upload.content_type or None,
        original_name=upload.filename or None,
    )
