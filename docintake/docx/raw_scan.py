import re

from docintake.extraction.models import (
    XML_REGEX_FALLBACK,
    DocumentMetadata,
    ExtractionResult,
    Page,
)
from docintake.extraction.strategy import ExtractionContext, ExtractionStrategy
from docintake.extraction.text import collapse_whitespace, count_words, decode_permissive

# XML text nodes stay contiguous in stored (uncompressed) archive members,
# so these match even when the ZIP directory itself is unreadable.
RAW_TEXT_PATTERNS = (
    re.compile(r"<w:t[^>]*>([^<]+)</w:t>"),
    re.compile(r"<text[^>]*>([^<]+)</text>"),
    re.compile(r"\bword/document\.xml.*?<w:t[^>]*>([^<]+)</w:t>"),
    re.compile(r""">[가-힣a-zA-Z0-9\s.,!?():\-/\[\]{}'"@#$%^&*+=<>~`|\\]{5,}</w:t>"""),
)

_TAG_RE = re.compile(r"<[^>]+>")
MIN_FRAGMENT_CHARS = 3


class XmlRegexFallbackStrategy(ExtractionStrategy):
    """Scans the raw DOCX bytes for text-run fragments."""

    method = XML_REGEX_FALLBACK
    min_chars = 20

    def __init__(self, max_chars: int = 20_000) -> None:
        self._max_chars = max_chars

    def attempt(self, context: ExtractionContext) -> ExtractionResult:
        decoded = decode_permissive(context.buffer)
        fragments: list[str] = []
        for pattern in RAW_TEXT_PATTERNS:
            for match in pattern.finditer(decoded):
                if pattern.groups:
                    fragment = match.group(1).strip()
                else:
                    fragment = _TAG_RE.sub("", match.group(0)).lstrip(">").strip()
                if len(fragment) > MIN_FRAGMENT_CHARS:
                    fragments.append(fragment)

        text = collapse_whitespace(" ".join(fragments))[: self._max_chars]
        return ExtractionResult(
            text=text,
            extraction_method=self.method,
            metadata=DocumentMetadata(page_count=1, file_size=len(context.buffer)),
            pages=[Page(page_number=1, content=text, word_count=count_words(text))],
        )
