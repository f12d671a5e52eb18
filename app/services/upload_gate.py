from __future__ import annotations

import logging

from fastapi import UploadFile

from app.core.errors import MissingFile, TooLarge, UnsupportedType
from app.schemas.analysis import UploadedDocument

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = frozenset({"application/pdf"})
PDF_MAGIC = b"%PDF-"
READ_CHUNK_BYTES = 64 * 1024


def normalize_content_type(content_type: str | None) -> str:
    if not content_type:
        return ""
    return content_type.split(";")[0].strip().lower()


def too_large_error(max_bytes: int) -> TooLarge:
    return TooLarge(f"File size exceeds {max_bytes // (1024 * 1024)}MB limit")


def validate_upload(*, content_type: str | None, size_bytes: int, max_bytes: int) -> None:
    """Metadata-only checks: the declared type is trusted, content is not inspected."""
    declared = normalize_content_type(content_type)
    if declared not in ALLOWED_CONTENT_TYPES:
        raise UnsupportedType(details=f"declared content type '{declared or 'unknown'}'")
    if size_bytes > max_bytes:
        raise too_large_error(max_bytes)


def validate_upload_signature(content: bytes) -> None:
    if not content.startswith(PDF_MAGIC):
        raise UnsupportedType(details="File signature does not match .pdf content.")


async def read_upload(
    file: UploadFile | None,
    *,
    max_bytes: int,
    verify_signature: bool = False,
) -> UploadedDocument:
    if file is None:
        logger.info("upload_rejected reason=missing_file")
        raise MissingFile()

    filename = file.filename or "resume.pdf"
    content_type = normalize_content_type(file.content_type)
    try:
        validate_upload(content_type=content_type, size_bytes=file.size or 0, max_bytes=max_bytes)
    except (UnsupportedType, TooLarge) as exc:
        logger.info("upload_rejected reason=%s content_type=%s size=%s", exc.code, content_type, file.size)
        raise

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            logger.info("upload_rejected reason=too_large content_type=%s size>%s", content_type, max_bytes)
            raise too_large_error(max_bytes)
        chunks.append(chunk)
    content = b"".join(chunks)

    if verify_signature:
        try:
            validate_upload_signature(content)
        except UnsupportedType:
            logger.info("upload_rejected reason=signature_mismatch filename=%s", filename)
            raise

    return UploadedDocument(
        content=content,
        content_type=content_type,
        filename=filename,
        size_bytes=total,
    )
