"""Placeholder prose for uploads whose text could not be recovered.

The synthesized text is handed downstream as if it were extracted content,
so it always names the file and lists the sections a document of that kind
usually contains.
"""

import re
from collections.abc import Callable
from datetime import datetime

from docintake.extraction.models import (
    DOCX,
    FILENAME_PLACEHOLDER,
    PDF,
    TXT,
    DocumentMetadata,
    ExtractionResult,
    Page,
)
from docintake.extraction.strategy import ExtractionContext, ExtractionStrategy
from docintake.extraction.text import count_words

FORMAT_LABELS = {
    PDF: "PDF document",
    DOCX: "Microsoft Word document (DOCX)",
    TXT: "Plain text document",
}

PROPOSAL_TOKENS = ("제안서", "제안", "proposal")
RFP_TOKENS = ("rfp", "제안요청", "request for proposal")
CONTRACT_TOKENS = ("계약", "협약", "contract", "agreement")
REPORT_TOKENS = ("보고서", "report")

PROPOSAL_HINTS = (
    "Project overview and objectives",
    "Proposed solution and technical approach",
    "Project schedule and delivery plan",
    "Budget and investment plan",
    "Expected benefits and risk management",
)
RFP_HINTS = (
    "Project background and scope",
    "Technical requirements and performance criteria",
    "Evaluation criteria and scoring",
    "Submission conditions and schedule",
    "Contract terms and legal conditions",
)
CONTRACT_HINTS = (
    "Contract scope and conditions",
    "Delivery terms and schedule",
    "Legal terms and liability",
)
REPORT_HINTS = (
    "Current status and progress",
    "Results and performance analysis",
    "Issues and improvement items",
    "Next steps and recommendations",
)
GENERIC_HINTS = (
    "Business purpose and background",
    "Project-related information",
    "Technical content",
    "Execution plan and expected value",
)

_HANGUL_RE = re.compile(r"[가-힣]")
_SPECIALIZED_RE = re.compile(
    r"프로젝트|project|원가관리|cost|management|제출|submit|한수원|KHNP", re.IGNORECASE
)


def _has_any(name: str, tokens: tuple[str, ...]) -> bool:
    return any(token in name for token in tokens)


class PlaceholderSynthesizer:
    """Builds descriptive substitute text from a file name and declared type."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    def synthesize(self, file_name: str, file_type: str) -> str:
        name = file_name or "uploaded_document"
        if file_type == DOCX:
            return self._docx_placeholder(name)
        return self._generic_placeholder(name, file_type)

    def content_hints(self, file_name: str, file_type: str) -> tuple[str, ...]:
        """Sections a document with this name is expected to contain.

        PDF names are checked for contract tokens, DOCX names for report
        tokens; proposal and RFP tokens apply to both.
        """
        name = file_name.lower()
        if _has_any(name, RFP_TOKENS):
            return RFP_HINTS
        if _has_any(name, PROPOSAL_TOKENS):
            return PROPOSAL_HINTS
        if file_type == DOCX and _has_any(name, REPORT_TOKENS):
            return REPORT_HINTS
        if file_type != DOCX and _has_any(name, CONTRACT_TOKENS):
            return CONTRACT_HINTS
        return GENERIC_HINTS

    def _generic_placeholder(self, name: str, file_type: str) -> str:
        label = FORMAT_LABELS.get(file_type, "Uploaded document")
        lines = [
            f"File analysis placeholder - {name}",
            "",
            f"This text stands in for the uploaded {label.lower()}.",
            "The document content could not be fully extracted, so the analysis",
            "continues from the file name and available metadata.",
            "",
            "File information:",
            f"- File name: {name}",
            f"- Format: {label}",
            "- Status: upload complete",
            "",
            "Expected content (from the file name):",
        ]
        lines.extend(f"- {hint}" for hint in self.content_hints(name, file_type))
        return "\n".join(lines)

    def _docx_placeholder(self, name: str) -> str:
        language = "Korean" if _HANGUL_RE.search(name) else "English"
        lines = [
            f"DOCX document analysis placeholder - {name}",
            "",
            "Document information:",
            f"- File name: {name}",
            f"- Format: {FORMAT_LABELS[DOCX]}",
            f"- Uploaded: {self._clock().date().isoformat()}",
            f"- Language: {language}",
            "",
            "Expected sections:",
        ]
        lines.extend(f"- {hint}" for hint in self.content_hints(name, DOCX))
        if _SPECIALIZED_RE.search(name):
            lines.extend(
                [
                    "",
                    "File name suggests a specialized document:",
                    "- Cost management or project delivery material",
                    "- Prepared for a named institution",
                    "- Written for formal submission",
                ]
            )
        return "\n".join(lines)


class FilenamePlaceholderStrategy(ExtractionStrategy):
    """Last ladder rung: cannot fail, always returns placeholder prose."""

    method = FILENAME_PLACEHOLDER
    min_chars = 1

    def __init__(self, synthesizer: PlaceholderSynthesizer) -> None:
        self._synthesizer = synthesizer

    def attempt(self, context: ExtractionContext) -> ExtractionResult:
        text = self._synthesizer.synthesize(context.file_name, context.file_type)
        metadata = context.metadata or DocumentMetadata(
            page_count=1, file_size=len(context.buffer)
        )
        return ExtractionResult(
            text=text,
            extraction_method=self.method,
            metadata=metadata,
            pages=[Page(page_number=1, content=text, word_count=count_words(text))],
        )
