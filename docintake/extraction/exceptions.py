class ExtractionError(Exception):
    """Base exception for text extraction errors."""


class StrategyFailedError(ExtractionError):
    """Raised by a ladder rung that cannot produce text for this input."""


class ExtractionExhaustedError(ExtractionError):
    """Raised when no rung of a ladder produced sufficient text."""
