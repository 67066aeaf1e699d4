from docintake.extraction.models import PLAIN_TEXT, DocumentMetadata, ExtractionResult, Page
from docintake.extraction.strategy import ExtractionContext, ExtractionStrategy
from docintake.extraction.text import count_words


class PlainTextStrategy(ExtractionStrategy):
    """Decodes a UTF-8 text upload; form feeds mark page boundaries."""

    method = PLAIN_TEXT

    def attempt(self, context: ExtractionContext) -> ExtractionResult:
        text = context.buffer.decode("utf-8-sig", errors="replace").strip()
        segments = [segment.strip() for segment in text.split("\f") if segment.strip()]
        pages = [
            Page(page_number=index, content=segment, word_count=count_words(segment))
            for index, segment in enumerate(segments, start=1)
        ]
        return ExtractionResult(
            text=text,
            extraction_method=self.method,
            metadata=DocumentMetadata(
                page_count=max(1, len(pages)), file_size=len(context.buffer)
            ),
            pages=pages,
        )
