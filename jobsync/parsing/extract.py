from __future__ import annotations

import logging
from io import BytesIO
from zipfile import BadZipFile, ZipFile

from jobsync.core.errors import ValidationError

logger = logging.getLogger(__name__)

MAX_DOCUMENT_BYTES = 5 * 1024 * 1024
SUPPORTED_EXTENSIONS = frozenset({"pdf", "docx", "txt"})

PDF_MAGIC = b"%PDF-"
ZIP_MAGICS = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")


def file_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def _zip_has_paths(content: bytes, prefix: str) -> bool:
    try:
        with ZipFile(BytesIO(content)) as archive:
            return any(name.startswith(prefix) for name in archive.namelist())
    except BadZipFile:
        return False


def _is_probably_text(content: bytes) -> bool:
    sample = content[:4096]
    if not sample:
        return True
    if b"\x00" in sample:
        return False
    printable = sum(1 for byte in sample if byte in (9, 10, 13) or byte >= 32)
    return printable / len(sample) >= 0.75


def validate_document(filename: str, content: bytes) -> str:
    """Check extension, size and file signature; return the extension."""
    ext = file_extension(filename)
    if ext == "doc":
        raise ValidationError("Legacy .doc is not supported. Convert to .docx.")
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValidationError("Please upload a PDF, DOCX, or TXT file")
    if len(content) > MAX_DOCUMENT_BYTES:
        raise ValidationError("File size must be less than 5MB", status_code=413)
    if ext == "pdf" and not content.startswith(PDF_MAGIC):
        raise ValidationError("File signature does not match .pdf content.")
    if ext == "docx" and not (
        any(content.startswith(magic) for magic in ZIP_MAGICS) and _zip_has_paths(content, "word/")
    ):
        raise ValidationError("File signature does not match .docx content.")
    if ext == "txt" and not _is_probably_text(content):
        raise ValidationError("File signature does not match .txt text content.")
    return ext


def _decode_text(content: bytes) -> str:
    for encoding in ("utf-8", "utf-16"):
        try:
            return content.decode(encoding)
        except UnicodeDecodeError:
            continue
    return content.decode("latin-1")


def _pdf_text(content: bytes) -> str:
    from pypdf import PdfReader

    try:
        reader = PdfReader(BytesIO(content))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as exc:
        raise ValidationError("Unable to extract text from this PDF file.") from exc
    return "\n\n".join(page for page in pages if page.strip())


def _docx_text(content: bytes) -> str:
    from docx import Document

    try:
        document = Document(BytesIO(content))
    except Exception as exc:
        raise ValidationError("Unable to extract text from this DOCX file.") from exc
    return "\n".join(paragraph.text for paragraph in document.paragraphs if paragraph.text.strip())


def extract_document_text(filename: str, content: bytes) -> str:
    ext = validate_document(filename, content)
    if ext == "pdf":
        text = _pdf_text(content)
    elif ext == "docx":
        text = _docx_text(content)
    else:
        text = _decode_text(content)
    if not text.strip():
        logger.warning("document_without_text filename=%s", filename)
    return text
