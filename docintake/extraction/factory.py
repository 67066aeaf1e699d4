from docintake.config.settings import Settings
from docintake.docx.raw_scan import XmlRegexFallbackStrategy
from docintake.docx.zip_xml import ZipXmlStrategy
from docintake.extraction.extractor import DocumentExtractor
from docintake.extraction.placeholder import FilenamePlaceholderStrategy, PlaceholderSynthesizer
from docintake.extraction.plain_text import PlainTextStrategy
from docintake.extraction.strategy import ExtractionLadder
from docintake.pdf.factory import PdfExtractorFactory
from docintake.pdf.strategies import (
    BinaryScanStrategy,
    PrimaryLibraryStrategy,
    StructuralFallbackStrategy,
)
from docintake.pdf.structure_reader import PdfStructureReader


class ExtractorFactory:
    """Builds the per-type fallback ladders from settings."""

    @classmethod
    def create(
        cls,
        settings: Settings,
        synthesizer: PlaceholderSynthesizer | None = None,
    ) -> DocumentExtractor:
        synthesizer = synthesizer or PlaceholderSynthesizer()
        structure_reader = PdfStructureReader()

        pdf_ladder = ExtractionLadder(
            [
                PrimaryLibraryStrategy(PdfExtractorFactory.create(settings)),
                StructuralFallbackStrategy(structure_reader),
                BinaryScanStrategy(structure_reader, max_chars=settings.binary_scan_max_chars),
                FilenamePlaceholderStrategy(synthesizer),
            ]
        )
        docx_ladder = ExtractionLadder(
            [
                ZipXmlStrategy(max_chars=settings.docx_xml_max_chars),
                XmlRegexFallbackStrategy(max_chars=settings.docx_raw_max_chars),
                FilenamePlaceholderStrategy(synthesizer),
            ]
        )
        txt_ladder = ExtractionLadder(
            [
                PlainTextStrategy(),
                FilenamePlaceholderStrategy(synthesizer),
            ]
        )
        return DocumentExtractor(pdf_ladder, docx_ladder, txt_ladder)
