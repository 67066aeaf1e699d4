from dataclasses import dataclass, field

HEADER = "header"
BODY = "body"
TABLE = "table"
LIST = "list"
CONCLUSION = "conclusion"

RFP = "rfp"
PROPOSAL = "proposal"
REPORT = "report"
PRESENTATION = "presentation"
OTHER = "other"


@dataclass
class Section:
    title: str
    content: str = ""
    section_type: str = BODY
    word_count: int = 0


@dataclass(frozen=True)
class DocumentStructure:
    """Derived view of extracted text; recomputed on demand, never persisted."""

    document_type: str
    sections: list[Section] = field(default_factory=list)
    key_topics: list[str] = field(default_factory=list)
    estimated_reading_time_minutes: int = 0
