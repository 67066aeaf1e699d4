"""Heuristic structure analysis of extracted document text."""

import math
import re
from collections import Counter

from docintake.analysis.models import (
    BODY,
    CONCLUSION,
    HEADER,
    LIST,
    OTHER,
    PRESENTATION,
    PROPOSAL,
    REPORT,
    RFP,
    TABLE,
    DocumentStructure,
    Section,
)
from docintake.extraction.text import count_words
from docintake.logging.logger import Log

# First matching category wins.
DOCUMENT_TYPE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (RFP, ("request for proposal", "rfp", "제안요청서", "입찰공고", "사업계획", "요구사항", "평가기준")),
    (PROPOSAL, ("제안서", "proposal", "사업제안", "기술제안", "솔루션", "방안", "추진계획")),
    (REPORT, ("보고서", "report", "분석", "결과", "현황", "실적")),
    (PRESENTATION, ("발표", "presentation", "ppt", "설명자료", "브리핑")),
)

SECTION_TYPE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (HEADER, ("목차", "차례", "개요", "contents", "overview")),
    (TABLE, ("표", "table", "비교")),
    (LIST, ("목록", "list", "항목")),
    (CONCLUSION, ("결론", "마무리", "요약", "conclusion", "summary")),
)

HEADING_PATTERNS = (
    re.compile(r"^\d+\.\s+.+"),
    re.compile(r"^제\d+장\s+.+"),
    re.compile(r"^[가-힣]+\s*[:：]\s*.+"),
    re.compile(r"^[A-Z][^\n]{10,50}$"),
)

STOP_WORDS = frozenset(
    {
        "그리고", "하지만", "그러나", "또한", "따라서", "이것", "그것", "이에",
        "대한", "위한", "통해", "대해", "있는", "없는", "되는", "하는", "같은",
        "다른", "새로운", "기본", "주요", "전체", "일반", "특별",
        "the", "and", "for", "with", "that", "this", "from", "are", "was",
        "were", "will", "have", "has", "not", "but", "all", "can", "our",
        "their", "into", "which", "these", "those",
    }
)

_NON_WORD_RE = re.compile(r"[^\w가-힣\s]")

OPENING_SECTION_TITLE = "Document start"
WHOLE_DOCUMENT_TITLE = "Full document"
TOPIC_LIMIT = 10


class StructureAnalyzer:
    """Segments text into sections and derives type, topics and reading time.

    Pure: the same text and file name always give the same structure.
    """

    def __init__(self, words_per_minute: int = 200) -> None:
        if words_per_minute <= 0:
            raise ValueError("words_per_minute must be positive")
        self._words_per_minute = words_per_minute

    def analyze(self, text: str, file_name: str) -> DocumentStructure:
        sections = self.identify_sections(text)
        structure = DocumentStructure(
            document_type=self.classify_document_type(text, file_name),
            sections=sections,
            key_topics=self.extract_key_topics(text),
            estimated_reading_time_minutes=math.ceil(
                count_words(text) / self._words_per_minute
            ),
        )
        Log.info(
            f"Analyzed {file_name}: {structure.document_type}, "
            f"{len(sections)} sections, {len(structure.key_topics)} topics"
        )
        return structure

    def classify_document_type(self, text: str, file_name: str) -> str:
        text_lower = text.lower()
        name_lower = file_name.lower()
        for document_type, keywords in DOCUMENT_TYPE_KEYWORDS:
            if any(keyword in text_lower or keyword in name_lower for keyword in keywords):
                return document_type
        return OTHER

    def identify_sections(self, text: str) -> list[Section]:
        """Split text at heading lines.

        Heading lines become titles; blank lines are skipped and every other
        line is kept verbatim in the current section body. Sections without
        a body are dropped.
        """
        sections: list[Section] = []
        current = Section(title=OPENING_SECTION_TITLE)

        for line in text.split("\n"):
            stripped = line.strip()
            if not stripped:
                continue
            if self.is_heading(stripped):
                self._close(current, sections)
                current = Section(title=stripped, section_type=self.section_type(stripped))
            else:
                current.content += line + "\n"

        self._close(current, sections)
        if sections:
            return sections
        return [Section(title=WHOLE_DOCUMENT_TITLE, content=text, word_count=count_words(text))]

    @staticmethod
    def is_heading(line: str) -> bool:
        return any(pattern.match(line) for pattern in HEADING_PATTERNS)

    @staticmethod
    def section_type(title: str) -> str:
        title_lower = title.lower()
        for section_type, keywords in SECTION_TYPE_KEYWORDS:
            if any(keyword in title_lower for keyword in keywords):
                return section_type
        return BODY

    @staticmethod
    def extract_key_topics(text: str) -> list[str]:
        """Most frequent tokens longer than two characters, stop words excluded."""
        words = [
            word
            for word in _NON_WORD_RE.sub(" ", text.lower()).split()
            if len(word) > 2 and word not in STOP_WORDS
        ]
        return [word for word, _count in Counter(words).most_common(TOPIC_LIMIT)]

    @staticmethod
    def _close(section: Section, sections: list[Section]) -> None:
        if section.content.strip():
            section.word_count = count_words(section.content)
            sections.append(section)


def analyze_structure(text: str, file_name: str) -> DocumentStructure:
    return StructureAnalyzer().analyze(text, file_name)
