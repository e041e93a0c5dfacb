"""Detector comparing texts against registered languages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ngramdet.config import DEFAULT_MINIMUM_CONFIDENCE, heal_minimum_confidence
from ngramdet.detection import DetectionError, DetectionResult
from ngramdet.detection.language import Language, analyze
from ngramdet.detection.lookup import LazyRankTable
from ngramdet.registry import LanguageRegistry, create_default_registry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ngramdet.config import NgramdetConfig
    from ngramdet.detection import LanguageComparator

logger = logging.getLogger(__name__)

UNDEFINED = "undefined"


def as_percent(value: float) -> int:
    """Convert a 0..1 ratio to whole percent, truncating."""
    return int(value * 100)


class Detector:
    """Determines which registered language a text is closest to.

    The detector holds an ordered list of comparators, usually Language
    profiles, and a minimum confidence below which no language is reported.
    Languages may be added between calls but not while a detection is
    running.

    Example:
        >>> detector = Detector()
        >>> english = detector.add_language("english", "the cat sat on the mat")
        >>> german = detector.add_language("german", "die katze sass auf der matte")
        >>> detector.closest_language("the cat sat on the mat")
        'english'
    """

    def __init__(
        self,
        languages: Iterable[LanguageComparator] | None = None,
        *,
        minimum_confidence: float = DEFAULT_MINIMUM_CONFIDENCE,
    ) -> None:
        """Initialize detector.

        Args:
            languages: Comparators to detect, in priority order for ties
            minimum_confidence: Threshold in (0, 1]; other values fall back
                to the default
        """
        self._languages: list[LanguageComparator] = list(languages or [])
        self.minimum_confidence = minimum_confidence

    @classmethod
    def from_registry(
        cls,
        registry: LanguageRegistry,
        *,
        minimum_confidence: float = DEFAULT_MINIMUM_CONFIDENCE,
    ) -> Detector:
        """Create a detector for every language of a registry."""
        return cls(registry.languages, minimum_confidence=minimum_confidence)

    @property
    def minimum_confidence(self) -> float:
        """Return the minimum confidence for closest_language."""
        return self._minimum_confidence

    @minimum_confidence.setter
    def minimum_confidence(self, value: Any) -> None:
        self._minimum_confidence = heal_minimum_confidence(value)

    @property
    def languages(self) -> tuple[LanguageComparator, ...]:
        """Return the registered comparators."""
        return tuple(self._languages)

    def add_language(self, name: str, training_text: str) -> Language:
        """Analyze training text and make the language detectable.

        Args:
            name: Name of the language
            training_text: Representative text written in the language

        Returns:
            The new Language profile
        """
        language = analyze(training_text, name)
        self._languages.append(language)
        logger.debug("Added language %s", name)
        return language

    def add_profile(self, *languages: Language) -> None:
        """Add pre-built language profiles."""
        self.add_comparators(*languages)

    def add_comparators(self, *comparators: LanguageComparator) -> None:
        """Add comparators of any kind."""
        self._languages.extend(comparators)

    def closest_language(self, text: str) -> str:
        """Get the name of the language closest to text.

        Args:
            text: Text to detect

        Returns:
            Name of the best match, or UNDEFINED if no language is configured
            or the best match is below the minimum confidence
        """
        if not self._languages:
            logger.warning("No languages configured for this detector")
            return UNDEFINED

        results = self.get_languages(text)
        if not results or results[0].confidence < as_percent(self.minimum_confidence):
            return UNDEFINED
        return results[0].name

    def get_languages(self, text: str) -> list[DetectionResult]:
        """Compare text with every language.

        The text is profiled at most once, and only if a comparator asks for
        its rank table. A comparator raising DetectionError scores 0.

        Args:
            text: Text to detect

        Returns:
            DetectionResult per language, highest confidence first; equal
            confidences keep registration order
        """
        lookup = LazyRankTable(text)
        results = [self._compare(language, lookup, text) for language in self._languages]
        return sorted(results, key=lambda result: result.confidence, reverse=True)

    def _compare(
        self, language: LanguageComparator, lookup: LazyRankTable, text: str
    ) -> DetectionResult:
        try:
            return language.compare_to(lookup, text)
        except DetectionError as e:
            logger.warning("Comparison with %s failed: %s", language.name, e)
            return DetectionResult(name=language.name, confidence=0)


def create_detector(config: NgramdetConfig | None = None) -> Detector:
    """Create a detector from configuration.

    Args:
        config: Configuration, defaults apply when omitted

    Returns:
        Detector with the configured languages and threshold

    Raises:
        ProfileError: If a configured profile or corpus file cannot be loaded
    """
    if config is None:
        return Detector.from_registry(create_default_registry())

    profiles = config.profiles
    registry = create_default_registry() if profiles.include_defaults else LanguageRegistry()

    for profile_file in profiles.profile_files:
        registry.load_from_json(Path(profile_file).expanduser())
    for corpus_file in profiles.corpus_files:
        registry.load_from_yaml(Path(corpus_file).expanduser())

    detector = Detector.from_registry(
        registry,
        minimum_confidence=config.detection.minimum_confidence,
    )
    logger.info(
        "Created detector: languages=%d, minimum_confidence=%s",
        len(detector.languages),
        detector.minimum_confidence,
    )
    return detector
