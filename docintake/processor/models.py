from dataclasses import asdict, dataclass

from docintake.analysis.models import DocumentStructure
from docintake.extraction.models import ExtractionResult, FileClassification


@dataclass(frozen=True)
class ProcessedDocument:
    """Everything the prompt-construction layer needs about one upload."""

    file_name: str
    classification: FileClassification
    extraction: ExtractionResult
    structure: DocumentStructure

    def as_dict(self) -> dict[str, object]:
        return {
            "file_name": self.file_name,
            "classification": asdict(self.classification),
            "extraction": self.extraction.as_dict(),
            "structure": asdict(self.structure),
        }
