from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from docintake.extraction.exceptions import ExtractionExhaustedError, StrategyFailedError
from docintake.extraction.models import DocumentMetadata, ExtractionResult
from docintake.extraction.text import has_enough_text
from docintake.logging.logger import Log


@dataclass(slots=True)
class ExtractionContext:
    """Per-call input shared by every rung of one ladder run."""

    buffer: bytes
    file_name: str
    file_type: str
    # Object-model metadata, read at most once and reused by later rungs.
    metadata: DocumentMetadata | None = None
    metadata_read: bool = False


class ExtractionStrategy(ABC):
    """One rung of a fallback ladder."""

    method: ClassVar[str]
    min_chars: ClassVar[int] = 10

    @abstractmethod
    def attempt(self, context: ExtractionContext) -> ExtractionResult:
        """Produce text for the upload in context.

        Raises:
            StrategyFailedError: if this rung cannot handle the input.
        """


class ExtractionLadder:
    """Runs strategies in order and returns the first sufficient result."""

    def __init__(self, strategies: list[ExtractionStrategy]) -> None:
        if not strategies:
            raise ValueError("ExtractionLadder needs at least one strategy")
        self._strategies = strategies

    def run(self, context: ExtractionContext) -> ExtractionResult:
        unexpected: Exception | None = None
        for strategy in self._strategies:
            try:
                result = strategy.attempt(context)
            except StrategyFailedError as exc:
                Log.warning(f"{strategy.method} failed for {context.file_name}: {exc}")
                continue
            except Exception as exc:
                Log.exception(f"{strategy.method} raised unexpectedly for {context.file_name}")
                unexpected = exc
                continue

            if not has_enough_text(result.text, strategy.min_chars):
                Log.warning(
                    f"{strategy.method} produced {len(result.text.strip())} chars for "
                    f"{context.file_name}, below {strategy.min_chars}"
                )
                continue

            Log.info(
                f"Extracted {len(result.text)} chars from {context.file_name} "
                f"via {strategy.method}"
            )
            return result

        raise ExtractionExhaustedError(
            f"No extraction strategy produced text for {context.file_name}"
        ) from unexpected
