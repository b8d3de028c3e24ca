"""Turn uploaded PDF / DOCX files into plain text.

Parsing never raises: failures come back as ``ParseResult(success=False)``
so callers can carry on with an empty CV.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from cv_copilot.models.document import FileValidation, ParseResult
from cv_copilot.parsers.text_loader import clean_text

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ALLOWED_TYPES = {PDF_MIME: ".pdf", DOCX_MIME: ".docx"}
TEXT_SUFFIXES = (".txt", ".md")

UNSUPPORTED_FORMAT = "Unsupported file format. Please upload a PDF or DOCX file."
NO_TEXT = "No text content found in the document."


def _mime_for(filename: str) -> str | None:
    suffix = Path(filename).suffix.lower()
    for mime, ext in ALLOWED_TYPES.items():
        if suffix == ext:
            return mime
    return None


def _extract_pdf(data: bytes) -> str:
    import fitz  # pymupdf

    doc = fitz.open(stream=data, filetype="pdf")
    try:
        if doc.needs_pass or doc.is_encrypted:
            raise ValueError("PDF is encrypted")
        return "\n".join(page.get_text() for page in doc)
    finally:
        doc.close()


def _extract_docx(data: bytes) -> str:
    from docx import Document

    doc = Document(io.BytesIO(data))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())


def parse_document(data: bytes, mime_type: str, filename: str = "") -> ParseResult:
    """Extract text from PDF or DOCX bytes.

    ``mime_type`` wins; when it is empty or generic the filename extension
    decides.
    """
    if mime_type not in ALLOWED_TYPES:
        mime_type = _mime_for(filename) or mime_type

    if mime_type == PDF_MIME:
        extract = _extract_pdf
    elif mime_type == DOCX_MIME:
        extract = _extract_docx
    else:
        return ParseResult(success=False, error=UNSUPPORTED_FORMAT)

    try:
        text = clean_text(extract(data))
    except Exception as exc:
        logger.warning("Failed to parse %s", filename or mime_type, exc_info=True)
        return ParseResult(success=False, error=f"Error parsing file: {exc}")

    if not text:
        return ParseResult(success=False, error=NO_TEXT)

    logger.debug("Parsed %s: %d chars", filename or mime_type, len(text))
    return ParseResult(text=text, success=True)


def validate_upload(
    filename: str,
    size: int,
    mime_type: str | None = None,
    *,
    max_size_mb: int = 10,
) -> FileValidation:
    """Check an upload against the size ceiling and the PDF/DOCX allowlist."""
    if size > max_size_mb * 1024 * 1024:
        return FileValidation(
            valid=False, error=f"File size exceeds {max_size_mb}MB limit."
        )
    if mime_type not in ALLOWED_TYPES and _mime_for(filename) is None:
        return FileValidation(valid=False, error=UNSUPPORTED_FORMAT)
    return FileValidation(valid=True)


def load_document(path: str | Path, *, max_size_mb: int = 10) -> ParseResult:
    """Validate and parse a file on disk. Plain-text files are read directly."""
    path = Path(path)
    if not path.exists():
        return ParseResult(success=False, error=f"File not found: {path}")

    if path.suffix.lower() in TEXT_SUFFIXES:
        try:
            text = clean_text(path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as exc:
            return ParseResult(success=False, error=f"Error parsing file: {exc}")
        if not text:
            return ParseResult(success=False, error=NO_TEXT)
        return ParseResult(text=text, success=True)

    validation = validate_upload(path.name, path.stat().st_size, max_size_mb=max_size_mb)
    if not validation.valid:
        return ParseResult(success=False, error=validation.error)
    return parse_document(path.read_bytes(), _mime_for(path.name) or "", path.name)
