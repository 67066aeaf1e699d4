import io
from datetime import datetime

from pypdf import PdfReader

from docintake.extraction.models import DocumentMetadata
from docintake.pdf.base import clean_info_value
from docintake.pdf.exceptions import PdfStructureError


class PdfStructureReader:
    """Reads page count and info dictionary through the pypdf object model.

    Used independently of text-stream parsing, so metadata survives even when
    no text can be recovered from the content streams.
    """

    def read(self, pdf_bytes: bytes) -> DocumentMetadata:
        """Return metadata for the PDF.

        Raises:
            PdfStructureError: if the document structure cannot be loaded.
        """
        try:
            reader = PdfReader(io.BytesIO(pdf_bytes), strict=False)
            page_count = len(reader.pages)
            info = reader.metadata
            if info is None:
                return DocumentMetadata(page_count=page_count, file_size=len(pdf_bytes))
            # Info entries may be indirect objects resolved on access.
            return DocumentMetadata(
                page_count=page_count,
                file_size=len(pdf_bytes),
                title=clean_info_value(info.title),
                author=clean_info_value(info.author),
                subject=clean_info_value(info.subject),
                creator=clean_info_value(info.creator),
                creation_date=_iso_date(info, "creation_date"),
                modification_date=_iso_date(info, "modification_date"),
            )
        except Exception as exc:
            raise PdfStructureError(f"pypdf could not load document: {exc}") from exc


def _iso_date(info: object, attribute: str) -> str | None:
    # pypdf parses PDF date strings lazily and raises on malformed ones.
    try:
        value = getattr(info, attribute)
    except (ValueError, TypeError):
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    return None
