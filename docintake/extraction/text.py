import re

_WHITESPACE_RE = re.compile(r"\s+")


def decode_permissive(buffer: bytes) -> str:
    """Decode bytes as UTF-8, replacing invalid sequences instead of failing."""
    return buffer.decode("utf-8", errors="replace")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text)


def count_words(text: str) -> int:
    """Whitespace-delimited token count."""
    return len(text.split())


def has_enough_text(text: str, min_chars: int) -> bool:
    return len(text.strip()) >= min_chars
