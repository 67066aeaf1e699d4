from docintake.analysis.structure import StructureAnalyzer
from docintake.config.settings import Settings
from docintake.extraction.factory import ExtractorFactory
from docintake.logging.logger import Log
from docintake.processor.models import ProcessedDocument
from docintake.processor.pipeline import PipelineContext, PipelineStep
from docintake.processor.steps import AnalyzeStructureStep, ExtractTextStep, ValidateUploadStep
from docintake.processor.upload_validator import UploadValidator


class Processor:
    """Runs an upload through the pipeline steps.

    Pipeline: validate -> extract -> analyze.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, raw_bytes: bytes, file_name: str) -> ProcessedDocument:
        Log.info(f"Processing {file_name} ({len(raw_bytes)} bytes)")
        context = PipelineContext(file_name=file_name, raw_bytes=raw_bytes)
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                context.error_message = str(exc)
                Log.error(
                    f"{type(step).__name__} failed for {file_name}: {context.error_message}"
                )
                raise

        if (
            context.classification is None
            or context.extraction is None
            or context.structure is None
        ):
            raise ValueError("Pipeline finished without producing a complete document")
        return ProcessedDocument(
            file_name=file_name,
            classification=context.classification,
            extraction=context.extraction,
            structure=context.structure,
        )


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required steps."""
    validator = UploadValidator(
        max_upload_bytes=settings.max_upload_bytes,
        allowed_extensions=settings.allowed_extensions,
    )
    extractor = ExtractorFactory.create(settings)
    analyzer = StructureAnalyzer(words_per_minute=settings.words_per_minute)
    return Processor(
        steps=[
            ValidateUploadStep(validator),
            ExtractTextStep(extractor),
            AnalyzeStructureStep(analyzer),
        ]
    )
