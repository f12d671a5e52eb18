from __future__ import annotations

import asyncio
import logging
from io import BytesIO

from pypdf import PdfReader

from app.core.errors import EmptyText, ExtractionFailed

logger = logging.getLogger(__name__)


def extract_pdf_text(content: bytes) -> str:
    """Return the text layer of a PDF, pages joined by newlines.

    Raises ``ExtractionFailed`` when pypdf cannot read the document (corrupt,
    encrypted, not a PDF at all) and ``EmptyText`` when it can be read but has
    no text layer, e.g. a scanned image-only resume.
    """
    try:
        reader = PdfReader(BytesIO(content))
        text_parts: list[str] = []
        for page in reader.pages:
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
    except Exception as exc:  # noqa: BLE001 - pypdf raises a wide range of errors on bad input
        logger.info("pdf_extraction_failed size=%s: %s", len(content), exc)
        raise ExtractionFailed(details=f"PDF parsing failed: {exc}") from exc

    text = "\n".join(text_parts)
    if not text.strip():
        logger.info("pdf_extraction_empty size=%s pages=%s", len(content), len(reader.pages))
        raise EmptyText()
    return text


async def extract_text(content: bytes) -> str:
    return await asyncio.to_thread(extract_pdf_text, content)
