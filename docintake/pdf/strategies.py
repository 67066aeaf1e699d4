"""PDF fallback ladder rungs: primary library, structural scan, binary scan."""

import math

from docintake.extraction.exceptions import StrategyFailedError
from docintake.extraction.models import (
    BINARY_SCAN_FALLBACK,
    PRIMARY_LIBRARY,
    STRUCTURAL_FALLBACK,
    DocumentMetadata,
    ExtractionResult,
    Page,
)
from docintake.extraction.strategy import ExtractionContext, ExtractionStrategy
from docintake.extraction.text import count_words
from docintake.logging.logger import Log
from docintake.pdf.base import BasePdfExtractor
from docintake.pdf.exceptions import PdfExtractionError, PdfStructureError
from docintake.pdf.scanning import (
    estimate_page_breaks,
    scan_printable_runs,
    scan_text_operators,
)
from docintake.pdf.structure_reader import PdfStructureReader


def split_proportionally(text: str, page_count: int) -> list[Page]:
    """Slice text into page_count equal character ranges.

    The primary libraries only hand back whole-document text here, so this
    approximates page boundaries; empty slices are dropped.
    """
    if page_count <= 0 or not text:
        page_count = 1
    chars_per_page = max(1, math.ceil(len(text) / page_count))
    pages: list[Page] = []
    for index in range(page_count):
        content = text[index * chars_per_page : (index + 1) * chars_per_page].strip()
        if content:
            pages.append(
                Page(page_number=index + 1, content=content, word_count=count_words(content))
            )
    return pages


def pages_from_segments(segments: list[str]) -> list[Page]:
    return [
        Page(page_number=index, content=segment, word_count=count_words(segment))
        for index, segment in enumerate(segments, start=1)
    ]


def recover_metadata(
    context: ExtractionContext, reader: PdfStructureReader
) -> DocumentMetadata | None:
    """Read the object-model metadata once per ladder run."""
    if not context.metadata_read:
        context.metadata_read = True
        try:
            context.metadata = reader.read(context.buffer)
        except PdfStructureError as exc:
            Log.warning(f"Metadata unavailable for {context.file_name}: {exc}")
    return context.metadata


class PrimaryLibraryStrategy(ExtractionStrategy):
    method = PRIMARY_LIBRARY

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def attempt(self, context: ExtractionContext) -> ExtractionResult:
        try:
            parsed = self._pdf_extractor.extract(context.buffer)
        except PdfExtractionError as exc:
            raise StrategyFailedError(str(exc)) from exc

        metadata = DocumentMetadata(
            page_count=parsed.page_count,
            file_size=len(context.buffer),
            **parsed.info,
        )
        return ExtractionResult(
            text=parsed.text,
            extraction_method=self.method,
            metadata=metadata,
            pages=split_proportionally(parsed.text, parsed.page_count),
        )


class StructuralFallbackStrategy(ExtractionStrategy):
    """Metadata from the object model, text from text-show operator scanning."""

    method = STRUCTURAL_FALLBACK

    def __init__(self, structure_reader: PdfStructureReader) -> None:
        self._structure_reader = structure_reader

    def attempt(self, context: ExtractionContext) -> ExtractionResult:
        metadata = recover_metadata(context, self._structure_reader)

        fragments = scan_text_operators(context.buffer)
        if not fragments:
            raise StrategyFailedError("no text-show operators found")

        segments = estimate_page_breaks("\n".join(fragments))
        pages = pages_from_segments(segments)
        text = "\n\n".join(page.content for page in pages)
        if metadata is None:
            metadata = DocumentMetadata(page_count=len(pages), file_size=len(context.buffer))

        return ExtractionResult(
            text=text,
            extraction_method=self.method,
            metadata=metadata,
            pages=pages,
        )


class BinaryScanStrategy(ExtractionStrategy):
    method = BINARY_SCAN_FALLBACK

    def __init__(self, structure_reader: PdfStructureReader, max_chars: int = 10_000) -> None:
        self._structure_reader = structure_reader
        self._max_chars = max_chars

    def attempt(self, context: ExtractionContext) -> ExtractionResult:
        text = scan_printable_runs(context.buffer, self._max_chars)
        metadata = recover_metadata(context, self._structure_reader) or DocumentMetadata(
            page_count=1, file_size=len(context.buffer)
        )
        return ExtractionResult(
            text=text,
            extraction_method=self.method,
            metadata=metadata,
            pages=[Page(page_number=1, content=text, word_count=count_words(text))],
        )
