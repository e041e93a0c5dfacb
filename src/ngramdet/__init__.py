"""ngramdet - Language identification from character n-gram profiles.

ngramdet tells which of a set of known languages a text is written in by:
1. Ranking the character n-grams of the text by frequency
2. Measuring the out-of-place distance to each language's ranking
3. Reporting the closest language if it is confident enough

No model files or network access are needed; profiles are built from
plain training text.

Example:
    >>> from ngramdet import Detector
    >>> detector = Detector()
    >>> english = detector.add_language("english", "The quick brown fox jumps over the lazy dog")
    >>> french = detector.add_language("french", "Le vif renard brun saute par-dessus le chien")
    >>> detector.closest_language("The quick brown fox jumps over the lazy dog")
    'english'

With the bundled default languages:
    >>> from ngramdet import create_detector
    >>> detector = create_detector()
    >>> [result.name for result in detector.get_languages("Alle Menschen sind frei")][:1]
    ['german']
"""

from ngramdet._version import __version__
from ngramdet.config import (
    ConfigurationError,
    NgramdetConfig,
    get_default_config,
    load_config,
)
from ngramdet.detection import (
    DetectionError,
    DetectionResult,
    LanguageComparator,
    RankTableProvider,
)
from ngramdet.detection.detector import UNDEFINED, Detector, create_detector
from ngramdet.detection.distance import get_distance
from ngramdet.detection.language import Language, analyze
from ngramdet.detection.lookup import LazyRankTable
from ngramdet.registry import LanguageRegistry, ProfileError, create_default_registry

__all__ = [
    "UNDEFINED",
    "ConfigurationError",
    "DetectionError",
    "DetectionResult",
    "Detector",
    "Language",
    "LanguageComparator",
    "LanguageRegistry",
    "LazyRankTable",
    "NgramdetConfig",
    "ProfileError",
    "RankTableProvider",
    "__version__",
    "analyze",
    "create_default_registry",
    "create_detector",
    "get_default_config",
    "get_distance",
    "load_config",
]
