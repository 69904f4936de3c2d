from __future__ import annotations

import io
import logging
import re
from typing import Final

import pdfplumber
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_PDF_MAGIC: Final[bytes] = b"%PDF"
_HTML_TYPES: Final[frozenset[str]] = frozenset({"text/html", "application/xhtml+xml"})
_HTML_SUFFIXES: Final[tuple[str, ...]] = (".html", ".htm", ".xhtml")
_TEXT_SUFFIXES: Final[tuple[str, ...]] = (".txt", ".md", ".text")


class DocumentExtractionError(Exception):
    pass


def extract_text_from_pdf(data: bytes) -> str:
    pages: list[str] = []
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        for page in pdf.pages:
            pages.append(page.extract_text() or "")

    return "\n".join(pages).strip()


def extract_text_from_html(html: str) -> str:
    soup = BeautifulSoup(html, "lxml")

    # Remove noisy tags
    for tag in soup(["script", "style", "noscript", "header", "footer", "nav", "aside"]):
        tag.decompose()

    text = soup.get_text(separator=" ", strip=True)
    text = re.sub(r"\s+", " ", text).strip()

    return text


def _kind(data: bytes, filename: str | None, content_type: str | None) -> str:
    name = (filename or "").lower()
    ctype = (content_type or "").split(";")[0].strip().lower()

    if data.lstrip()[:4] == _PDF_MAGIC or ctype == "application/pdf" or name.endswith(".pdf"):
        return "pdf"
    if ctype in _HTML_TYPES or name.endswith(_HTML_SUFFIXES):
        return "html"
    if ctype.startswith("text/") or name.endswith(_TEXT_SUFFIXES):
        return "text"
    # PDF is the default upload type
    return "pdf"


def extract_text(
    data: bytes,
    *,
    filename: str | None = None,
    content_type: str | None = None,
) -> str:
    """
    Extract plain text from an uploaded document (PDF, HTML or plain text).

    Returns trimmed text, possibly empty. Raises DocumentExtractionError if
    the underlying parser fails.
    """
    if not data:
        return ""

    kind = _kind(data, filename, content_type)

    try:
        if kind == "html":
            text = extract_text_from_html(data.decode("utf-8", errors="replace"))
        elif kind == "text":
            text = data.decode("utf-8", errors="replace").strip()
        else:
            text = extract_text_from_pdf(data)
    except Exception as exc:  # noqa: BLE001
        raise DocumentExtractionError(str(exc) or f"Failed to parse {kind.upper()}") from exc

    logger.info("Extracted %d chars from %s upload %r", len(text), kind, filename)
    return text
