from unittest.mock import MagicMock

import pytest

from docintake.config.settings import Settings
from docintake.extraction.extractor import DocumentExtractor
from docintake.extraction.factory import ExtractorFactory
from docintake.extraction.models import (
    DOCX,
    FILENAME_PLACEHOLDER,
    PLAIN_TEXT,
    PRIMARY_LIBRARY,
    UNKNOWN,
    ZIP_XML,
    DocumentMetadata,
    ExtractionResult,
    FileClassification,
)
from docintake.extraction.strategy import ExtractionContext, ExtractionLadder


def _ladder(method: str) -> MagicMock:
    ladder = MagicMock(spec=ExtractionLadder)
    ladder.run.return_value = ExtractionResult(
        text=f"text from {method}",
        extraction_method=method,
        metadata=DocumentMetadata(page_count=1, file_size=0),
    )
    return ladder


def _extractor() -> tuple[DocumentExtractor, MagicMock, MagicMock, MagicMock]:
    pdf_ladder, docx_ladder, txt_ladder = _ladder("pdf"), _ladder("docx"), _ladder("txt")
    extractor = DocumentExtractor(pdf_ladder, docx_ladder, txt_ladder)
    return extractor, pdf_ladder, docx_ladder, txt_ladder


class TestDocumentExtractor:
    def test_dispatches_on_sniffed_type(self) -> None:
        extractor, pdf_ladder, docx_ladder, _txt = _extractor()

        result = extractor.extract(b"%PDF-1.7 body", "scope.pdf")

        assert result.extraction_method == "pdf"
        docx_ladder.run.assert_not_called()
        context = pdf_ladder.run.call_args.args[0]
        assert isinstance(context, ExtractionContext)
        assert context.file_name == "scope.pdf"
        assert context.file_type == "pdf"
        assert context.buffer == b"%PDF-1.7 body"

    def test_uses_given_classification(self) -> None:
        extractor, pdf_ladder, docx_ladder, _txt = _extractor()
        classification = FileClassification(is_valid=True, file_type=DOCX, mime_type="x")

        extractor.extract(b"%PDF-1.7", "odd.docx", classification=classification)

        docx_ladder.run.assert_called_once()
        pdf_ladder.run.assert_not_called()

    def test_rejects_invalid_classification(self) -> None:
        extractor, pdf_ladder, docx_ladder, txt_ladder = _extractor()

        with pytest.raises(ValueError, match=UNKNOWN):
            extractor.extract(b"\x00\x01", "blob.bin")

        for ladder in (pdf_ladder, docx_ladder, txt_ladder):
            ladder.run.assert_not_called()

    def test_typed_entry_points_skip_sniffing(self) -> None:
        extractor, _pdf, _docx, txt_ladder = _extractor()

        result = extractor.extract_txt(b"\xff\xfe", "latin.txt")

        assert result.extraction_method == "txt"
        txt_ladder.run.assert_called_once()


class TestExtractorFactory:
    def test_builds_working_docx_ladder(self, docx_bytes: bytes) -> None:
        extractor = ExtractorFactory.create(Settings())

        result = extractor.extract(docx_bytes, "proposal.docx")

        assert result.extraction_method == ZIP_XML

    def test_builds_txt_ladder_with_placeholder(self) -> None:
        extractor = ExtractorFactory.create(Settings())

        notes = extractor.extract_txt(b"meeting notes for the cloud project", "a.txt")
        assert notes.extraction_method == PLAIN_TEXT
        assert extractor.extract_txt(b"", "blank.txt").extraction_method == FILENAME_PLACEHOLDER

    def test_pdf_engine_from_settings(self, sample_pdf_bytes: bytes) -> None:
        extractor = ExtractorFactory.create(Settings(pdf_engine="pymupdf"))

        result = extractor.extract(sample_pdf_bytes, "rfp.pdf")

        assert result.extraction_method == PRIMARY_LIBRARY
        assert "Hello PDF World" in result.text

    def test_unknown_pdf_engine_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            ExtractorFactory.create(Settings(pdf_engine="ghostscript"))

    @pytest.mark.parametrize("buffer", [b"", b"abc", b"PK\x03"])
    def test_unreadable_docx_falls_through_to_placeholder(self, buffer: bytes) -> None:
        extractor = ExtractorFactory.create(Settings())

        result = extractor.extract_docx(buffer, "notes.docx")

        assert result.extraction_method == FILENAME_PLACEHOLDER
        assert "notes.docx" in result.text
