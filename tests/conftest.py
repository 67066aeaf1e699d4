import io
import zipfile

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

DOCUMENT_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
    "<w:body>\n"
    "<w:p><w:r><w:t>1. 프로젝트 개요</w:t></w:r></w:p>\n"
    '<w:p><w:pPr><w:jc w:val="left"/></w:pPr>'
    '<w:r><w:t xml:space="preserve">Cloud migration </w:t></w:r>'
    "<w:r><w:t>for R&amp;D teams</w:t></w:r></w:p>\n"
    "</w:body></w:document>"
)

EMPTY_DOCUMENT_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
    "<w:body><w:p/></w:body></w:document>"
)

CONTENT_TYPES_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types"/>'
)


def build_docx(
    document_xml: str | None,
    compression: int = zipfile.ZIP_DEFLATED,
) -> bytes:
    """Build a minimal DOCX container; document_xml=None omits the main part."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=compression) as archive:
        if document_xml is not None:
            archive.writestr("word/document.xml", document_xml)
        archive.writestr("[Content_Types].xml", CONTENT_TYPES_XML)
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.setTitle("Quarterly RFP")
    c.setAuthor("Procurement Office")
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.setTitle("Quarterly RFP")
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def uncompressed_pdf_bytes() -> bytes:
    """Single-page PDF whose content stream keeps readable Tj operators."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter, pageCompression=0)
    c.setTitle("Quarterly RFP")
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def docx_bytes() -> bytes:
    return build_docx(DOCUMENT_XML)


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    return build_docx(EMPTY_DOCUMENT_XML)


@pytest.fixture()
def corrupted_docx_bytes() -> bytes:
    """Stored DOCX with its central directory cut off."""
    data = build_docx(DOCUMENT_XML, compression=zipfile.ZIP_STORED)
    return data[: data.index(b"PK\x01\x02")]


@pytest.fixture()
def docx_factory():  # type: ignore[no-untyped-def]
    """Expose build_docx to tests that need a custom container."""
    return build_docx
