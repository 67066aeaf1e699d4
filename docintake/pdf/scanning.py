"""Regex heuristics for recovering text from raw PDF bytes.

These are deliberately not a PDF parser: they run after the structured parse
has already failed, and only look for text-show operators and printable runs
in the permissively decoded byte stream.
"""

import re

from docintake.extraction.text import collapse_whitespace, decode_permissive

# Text blocks, (string) Tj, [array] TJ, and font selection followed by text.
TEXT_OPERATOR_PATTERNS = (
    re.compile(r"BT\s+.*?ET", re.DOTALL),
    re.compile(r"\(([^)]+)\)\s*Tj"),
    re.compile(r"\[([^\]]+)\]\s*TJ"),
    re.compile(r"/F\d+\s+\d+\s+Tf\s+([^(]+)"),
)

PAGE_BREAK_PATTERNS = (
    re.compile(r"\f"),
    re.compile(r"페이지\s*\d+", re.IGNORECASE),
    re.compile(r"Page\s*\d+", re.IGNORECASE),
    re.compile(r"-\s*\d+\s*-"),
)

_OPERATOR_TOKEN_RE = re.compile(r"BT|ET|Tj|TJ|Tf|Td|TD")
_NUMERIC_LINE_RE = re.compile(r"^\d+(\.\d+)?\s*$", re.MULTILINE)
_STRAY_CHAR_RE = re.compile(r"[^\w\s가-힣.,!?()-]")
_PRINTABLE_RUN_RE = re.compile(r"[a-zA-Z가-힣0-9\s.,!?()/-]+")

MIN_FRAGMENT_CHARS = 5
MIN_PAGE_CHARS = 50
MIN_RUN_CHARS = 3


def clean_operator_text(raw: str) -> str:
    """Strip PDF operators, brackets, coordinates and stray punctuation."""
    text = _OPERATOR_TOKEN_RE.sub("", raw)
    text = text.replace("(", "").replace(")", "")
    text = text.replace("[", "").replace("]", "")
    text = _NUMERIC_LINE_RE.sub("", text)
    text = collapse_whitespace(text)
    text = _STRAY_CHAR_RE.sub("", text)
    return text.strip()


def scan_text_operators(pdf_bytes: bytes) -> list[str]:
    """Return cleaned fragments matched by the text-show operator patterns."""
    decoded = decode_permissive(pdf_bytes)
    fragments: list[str] = []
    for pattern in TEXT_OPERATOR_PATTERNS:
        for match in pattern.finditer(decoded):
            cleaned = clean_operator_text(match.group(0))
            if len(cleaned) > MIN_FRAGMENT_CHARS:
                fragments.append(cleaned)
    return fragments


def estimate_page_breaks(text: str) -> list[str]:
    """Split text on heuristic page-break markers.

    Patterns are tried in order; the first one that yields more non-trivial
    segments than the current split wins. Otherwise the text is one page.
    """
    pages = [text]
    for pattern in PAGE_BREAK_PATTERNS:
        candidate = [
            segment
            for page in pages
            for segment in pattern.split(page)
            if len(segment.strip()) > MIN_PAGE_CHARS
        ]
        if len(candidate) > len(pages):
            return candidate
    return pages


def scan_printable_runs(pdf_bytes: bytes, max_chars: int) -> str:
    """Join printable Latin/Hangul/digit runs found anywhere in the bytes."""
    decoded = decode_permissive(pdf_bytes)
    runs = [
        match.group(0)
        for match in _PRINTABLE_RUN_RE.finditer(decoded)
        if len(match.group(0).strip()) > MIN_RUN_CHARS
    ]
    return "\n".join(runs)[:max_chars]
