"""Magic-number sniffing of uploaded buffers."""

from docintake.extraction.models import (
    DOCX,
    DOCX_MIME_TYPE,
    PDF,
    PDF_MIME_TYPE,
    TXT,
    TXT_MIME_TYPE,
    UNKNOWN,
    UNKNOWN_MIME_TYPE,
    FileClassification,
)

PDF_MAGIC = b"%PDF"
ZIP_MAGIC = b"PK"


def classify(buffer: bytes, file_name: str) -> FileClassification:
    """Classify an upload from its leading bytes and file name.

    ZIP magic alone is shared by XLSX, PPTX and plain archives, so DOCX also
    requires the .docx extension. TXT requires the .txt extension and a
    strict UTF-8 decode.
    """
    name = file_name.lower()

    if buffer[:4] == PDF_MAGIC:
        return FileClassification(is_valid=True, file_type=PDF, mime_type=PDF_MIME_TYPE)

    if buffer[:2] == ZIP_MAGIC and name.endswith(".docx"):
        return FileClassification(is_valid=True, file_type=DOCX, mime_type=DOCX_MIME_TYPE)

    if name.endswith(".txt") and _is_strict_utf8(buffer):
        return FileClassification(is_valid=True, file_type=TXT, mime_type=TXT_MIME_TYPE)

    return FileClassification(is_valid=False, file_type=UNKNOWN, mime_type=UNKNOWN_MIME_TYPE)


def _is_strict_utf8(buffer: bytes) -> bool:
    try:
        buffer.decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        return False
    return True
