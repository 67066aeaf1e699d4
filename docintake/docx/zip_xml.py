import io
import re
import zipfile
import zlib

from docintake.extraction.exceptions import StrategyFailedError
from docintake.extraction.models import ZIP_XML, DocumentMetadata, ExtractionResult, Page
from docintake.extraction.strategy import ExtractionContext, ExtractionStrategy
from docintake.extraction.text import collapse_whitespace, count_words

DOCUMENT_PART = "word/document.xml"

RUN_RE = re.compile(r"<w:t(?:\s[^>]*)?>([^<]+)</w:t>")
EMPTY_OK_RUN_RE = re.compile(r"<w:t(?:\s[^>]*)?>([^<]*)</w:t>")
PARAGRAPH_RE = re.compile(r"<w:p(?:\s[^>]*)?>.*?</w:p>", re.DOTALL)


def decode_xml_entities(text: str) -> str:
    # &amp; last so "&amp;lt;" stays "&lt;".
    return text.replace("&lt;", "<").replace("&gt;", ">").replace("&amp;", "&")


def extract_document_xml_text(xml: str, max_chars: int) -> str:
    """Collect text runs, then paragraph-grouped runs, from document XML.

    Both passes contribute to the output; fragments of one character or
    less are dropped before joining.
    """
    fragments = [match.group(1).strip() for match in RUN_RE.finditer(xml)]
    for paragraph in PARAGRAPH_RE.finditer(xml):
        runs = EMPTY_OK_RUN_RE.findall(paragraph.group(0))
        fragments.append("".join(runs).strip())

    text = " ".join(fragment for fragment in fragments if len(fragment) > 1)
    return decode_xml_entities(collapse_whitespace(text))[:max_chars]


class ZipXmlStrategy(ExtractionStrategy):
    """Opens the DOCX container and reads the main document part."""

    method = ZIP_XML

    def __init__(self, max_chars: int = 50_000) -> None:
        self._max_chars = max_chars

    def attempt(self, context: ExtractionContext) -> ExtractionResult:
        try:
            with zipfile.ZipFile(io.BytesIO(context.buffer)) as archive:
                xml = archive.read(DOCUMENT_PART).decode("utf-8", errors="replace")
        except KeyError as exc:
            raise StrategyFailedError(f"{DOCUMENT_PART} not found in archive") from exc
        except (zipfile.BadZipFile, zipfile.LargeZipFile, zlib.error, OSError, EOFError) as exc:
            raise StrategyFailedError(f"cannot open DOCX archive: {exc}") from exc

        text = extract_document_xml_text(xml, self._max_chars)
        return ExtractionResult(
            text=text,
            extraction_method=self.method,
            metadata=DocumentMetadata(page_count=1, file_size=len(context.buffer)),
            pages=[Page(page_number=1, content=text, word_count=count_words(text))],
        )
