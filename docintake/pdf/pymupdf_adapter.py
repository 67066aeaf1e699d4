import pymupdf

from docintake.pdf.base import BasePdfExtractor, PdfParseResult, collect_info
from docintake.pdf.exceptions import PdfExtractionError

_INFO_FIELDS = {
    "title": "title",
    "author": "author",
    "subject": "subject",
    "creator": "creator",
    "creation_date": "creationDate",
    "modification_date": "modDate",
}


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> PdfParseResult:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
                raw_info = doc.metadata or {}
                page_count = doc.page_count
            info = collect_info(raw_info, _INFO_FIELDS)
            return PdfParseResult(
                text="\n".join(pages).strip(),
                page_count=page_count,
                info=info,
            )
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
