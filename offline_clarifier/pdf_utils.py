from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PyPDF2 import PdfReader


logger = logging.getLogger(__name__)

TEXT_SUFFIXES = {".txt", ".md", ".text"}


class DocumentLoadError(RuntimeError):
    pass


def extract_pages_from_pdf(pdf_path: str | Path, max_pages: Optional[int] = None) -> list[str]:
    """Extract per-page embedded text with PyPDF2 (no OCR)."""

    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise FileNotFoundError(str(pdf_path))

    page_texts: list[str] = []
    try:
        reader = PdfReader(str(pdf_path))
        pages = reader.pages[:max_pages] if max_pages else reader.pages
        for page in pages:
            page_texts.append(page.extract_text() or "")
    except Exception as e:
        raise DocumentLoadError(f"PyPDF2 failed to read PDF: {e}") from e

    logger.debug("read %d page(s) from %s", len(page_texts), pdf_path)
    return page_texts


def load_document(path: str | Path, max_pages: Optional[int] = None) -> str:
    """Return the text of a plain-text or PDF document."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(str(path))

    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return "\n".join(extract_pages_from_pdf(path, max_pages=max_pages)).strip()
    if suffix in TEXT_SUFFIXES or not suffix:
        return path.read_text(encoding="utf-8").strip()

    raise DocumentLoadError(f"Unsupported document type: {suffix}")
