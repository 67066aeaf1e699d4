from docintake.analysis.structure import StructureAnalyzer
from docintake.extraction.extractor import DocumentExtractor
from docintake.logging.logger import Log
from docintake.processor.pipeline import PipelineContext, PipelineStep
from docintake.processor.upload_validator import UploadValidator


class ValidateUploadStep(PipelineStep):
    def __init__(self, validator: UploadValidator) -> None:
        self._validator = validator

    def run(self, context: PipelineContext) -> PipelineContext:
        context.classification = self._validator.validate(context.raw_bytes, context.file_name)
        Log.info(
            f"Validated {context.file_name}: {context.classification.file_type} "
            f"({context.classification.mime_type})"
        )
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: DocumentExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.classification is None:
            raise ValueError("PipelineContext.classification must be set before extraction")
        context.extraction = self._extractor.extract(
            context.raw_bytes,
            context.file_name,
            classification=context.classification,
        )
        if context.extraction.is_low_confidence:
            Log.warning(
                f"Low-confidence text for {context.file_name} "
                f"({context.extraction.extraction_method})"
            )
        return context


class AnalyzeStructureStep(PipelineStep):
    def __init__(self, analyzer: StructureAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extraction is None:
            raise ValueError("PipelineContext.extraction must be set before structure analysis")
        context.structure = self._analyzer.analyze(context.extraction.text, context.file_name)
        return context
