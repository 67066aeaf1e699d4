from docintake.extraction.models import DOCX, PDF, TXT, ExtractionResult, FileClassification
from docintake.extraction.sniffer import classify
from docintake.extraction.strategy import ExtractionContext, ExtractionLadder
from docintake.logging.logger import Log


class DocumentExtractor:
    """Dispatches an upload to the fallback ladder for its file type."""

    def __init__(
        self,
        pdf_ladder: ExtractionLadder,
        docx_ladder: ExtractionLadder,
        txt_ladder: ExtractionLadder,
    ) -> None:
        self._ladders = {PDF: pdf_ladder, DOCX: docx_ladder, TXT: txt_ladder}

    def extract(
        self,
        buffer: bytes,
        file_name: str,
        classification: FileClassification | None = None,
    ) -> ExtractionResult:
        """Extract text from an upload that already passed classification.

        Raises:
            ValueError: if the classification is not a supported, valid type.
        """
        if classification is None:
            classification = classify(buffer, file_name)
        if not classification.is_valid or classification.file_type not in self._ladders:
            raise ValueError(
                f"Cannot extract from {file_name}: file type '{classification.file_type}'"
            )
        return self._run(classification.file_type, buffer, file_name)

    def extract_pdf(self, buffer: bytes, file_name: str) -> ExtractionResult:
        return self._run(PDF, buffer, file_name)

    def extract_docx(self, buffer: bytes, file_name: str) -> ExtractionResult:
        return self._run(DOCX, buffer, file_name)

    def extract_txt(self, buffer: bytes, file_name: str) -> ExtractionResult:
        return self._run(TXT, buffer, file_name)

    def _run(self, file_type: str, buffer: bytes, file_name: str) -> ExtractionResult:
        Log.info(f"Extracting {file_type} text from {file_name} ({len(buffer)} bytes)")
        context = ExtractionContext(buffer=buffer, file_name=file_name, file_type=file_type)
        return self._ladders[file_type].run(context)
