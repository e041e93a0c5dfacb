"""Language detection protocols and types."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

# Zero-argument accessor yielding the rank table of the text being detected
RankTableProvider = Callable[[], Mapping[str, int]]


@dataclass(frozen=True, slots=True)
class DetectionResult:
    """Result of comparing a text against one language.

    Attributes:
        name: Name of the language the text was compared with
        confidence: Confidence in percent, between 0 and 100
    """

    name: str
    confidence: int

    def __post_init__(self) -> None:
        """Validate confidence is in valid range."""
        if not 0 <= self.confidence <= 100:
            msg = f"confidence must be between 0 and 100, got {self.confidence}"
            raise ValueError(msg)


@runtime_checkable
class LanguageComparator(Protocol):
    """Protocol for anything a Detector can compare a text against.

    Language profiles are the built-in implementation, but any scoring
    strategy with a name and a ``compare_to`` method can be registered.

    Example:
        >>> class AlwaysEnglish:
        ...     @property
        ...     def name(self) -> str:
        ...         return "english"
        ...
        ...     def compare_to(self, lookup, original_text: str) -> DetectionResult:
        ...         return DetectionResult(name=self.name, confidence=100)
    """

    @property
    def name(self) -> str:
        """Return the name reported in detection results."""
        ...

    def compare_to(self, lookup: RankTableProvider, original_text: str) -> DetectionResult:
        """Compare a text with this language.

        Args:
            lookup: Accessor for the text's rank table. Calling it may trigger
                the profiling of the text, so comparators that do not need the
                table should not call it.
            original_text: The unmodified text being detected

        Returns:
            DetectionResult carrying this comparator's name
        """
        ...


class DetectionError(Exception):
    """Raised by comparators that cannot score a text.

    Detector logs the failure and scores the comparator 0 for that text.
    """

    def __init__(
        self,
        message: str,
        *,
        text: str | None = None,
        comparator: str | None = None,
    ) -> None:
        super().__init__(message)
        self.text = text
        self.comparator = comparator


__all__ = [
    "DetectionError",
    "DetectionResult",
    "LanguageComparator",
    "RankTableProvider",
]
