import io

import pdfplumber

from docintake.pdf.base import BasePdfExtractor, PdfParseResult, collect_info
from docintake.pdf.exceptions import PdfExtractionError

# pdfplumber exposes the raw PDF info dictionary.
_INFO_FIELDS = {
    "title": "Title",
    "author": "Author",
    "subject": "Subject",
    "creator": "Creator",
    "creation_date": "CreationDate",
    "modification_date": "ModDate",
}


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> PdfParseResult:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
                raw_info = pdf.metadata or {}
            info = collect_info(raw_info, _INFO_FIELDS)
            return PdfParseResult(
                text="\n".join(pages).strip(),
                page_count=len(pages),
                info=info,
            )
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
