from dataclasses import asdict, dataclass, field

PDF = "pdf"
DOCX = "docx"
TXT = "txt"
UNKNOWN = "unknown"

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TXT_MIME_TYPE = "text/plain"
UNKNOWN_MIME_TYPE = "application/octet-stream"

# Extraction method tags, one per ladder rung.
PRIMARY_LIBRARY = "primary-library"
STRUCTURAL_FALLBACK = "structural-fallback"
BINARY_SCAN_FALLBACK = "binary-scan-fallback"
ZIP_XML = "zip-xml"
XML_REGEX_FALLBACK = "xml-regex-fallback"
PLAIN_TEXT = "plain-text"
FILENAME_PLACEHOLDER = "filename-placeholder"

LOW_CONFIDENCE_METHODS = frozenset(
    {BINARY_SCAN_FALLBACK, XML_REGEX_FALLBACK, FILENAME_PLACEHOLDER}
)


@dataclass(frozen=True)
class FileClassification:
    """Result of sniffing the first bytes of an upload."""

    is_valid: bool
    file_type: str
    mime_type: str


@dataclass(frozen=True)
class Page:
    page_number: int
    content: str
    word_count: int


@dataclass(frozen=True)
class DocumentMetadata:
    """Document properties; optional fields stay None when the source has none."""

    page_count: int
    file_size: int
    title: str | None = None
    author: str | None = None
    subject: str | None = None
    creator: str | None = None
    creation_date: str | None = None
    modification_date: str | None = None

    def as_dict(self) -> dict[str, object]:
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class ExtractionResult:
    """Text recovered from an upload and the rung that produced it."""

    text: str
    extraction_method: str
    metadata: DocumentMetadata
    pages: list[Page] = field(default_factory=list)

    @property
    def is_low_confidence(self) -> bool:
        return self.extraction_method in LOW_CONFIDENCE_METHODS

    def as_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "extraction_method": self.extraction_method,
            "metadata": self.metadata.as_dict(),
            "pages": [
                {
                    "page_number": page.page_number,
                    "content": page.content,
                    "word_count": page.word_count,
                }
                for page in self.pages
            ],
        }
