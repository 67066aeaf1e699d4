from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PdfParseResult:
    """Output of a primary PDF library: full text, declared pages, info dict."""

    text: str
    page_count: int
    info: dict[str, str] = field(default_factory=dict)


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> PdfParseResult:
        """Extract plain text and document info from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            PdfParseResult with the whole document text, the declared page
            count and the non-empty info dictionary entries.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """


def clean_info_value(value: object) -> str | None:
    """Normalize an info dictionary value; empty values become None."""
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    text = str(value).strip()
    return text or None


def collect_info(raw_info: dict[str, object], fields: dict[str, str]) -> dict[str, str]:
    """Map a library info dictionary onto PdfParseResult.info keys, dropping empty values."""
    info: dict[str, str] = {}
    for key, source in fields.items():
        value = clean_info_value(raw_info.get(source))
        if value is not None:
            info[key] = value
    return info
