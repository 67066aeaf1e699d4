from docintake.config.settings import Settings
from docintake.pdf.base import BasePdfExtractor
from docintake.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docintake.pdf.pymupdf_adapter import PyMuPdfAdapter

ENGINES: dict[str, type[BasePdfExtractor]] = {
    "pdfplumber": PdfPlumberAdapter,
    "pymupdf": PyMuPdfAdapter,
}


class PdfExtractorFactory:
    """Resolves the primary-library rung of the PDF ladder by engine name."""

    @staticmethod
    def engine_names() -> list[str]:
        return sorted(ENGINES)

    @classmethod
    def for_engine(cls, engine: str) -> BasePdfExtractor:
        """Instantiate the adapter for engine; names are case-insensitive.

        Raises:
            ValueError: if no adapter is registered under that name.
        """
        adapter_cls = ENGINES.get(engine.strip().lower())
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {', '.join(cls.engine_names())}"
            )
        return adapter_cls()

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        return cls.for_engine(settings.pdf_engine)
