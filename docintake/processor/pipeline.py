from abc import ABC, abstractmethod
from dataclasses import dataclass

from docintake.analysis.models import DocumentStructure
from docintake.extraction.models import ExtractionResult, FileClassification


@dataclass(slots=True)
class PipelineContext:
    file_name: str
    raw_bytes: bytes = b""
    classification: FileClassification | None = None
    extraction: ExtractionResult | None = None
    structure: DocumentStructure | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
