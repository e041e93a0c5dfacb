"""ngramdet test configuration and fixtures."""

import pytest

from ngramdet import Detector

ENGLISH_TEXT = (
    "The quick brown fox jumps over the lazy dog. It is a sentence that people "
    "often use to test typewriters and keyboards, because it contains every letter "
    "of the alphabet. Over the years the sentence became well known, and many people "
    "still type it when they want to check that all the keys are working."
)

FRENCH_TEXT = (
    "Le vif renard brun sauta par-dessus le chien paresseux. C'est une phrase que "
    "l'on utilise souvent pour essayer les machines à écrire et les claviers, parce "
    "qu'elle contient presque toutes les lettres de l'alphabet. Avec les années, la "
    "phrase est devenue très connue et beaucoup de gens la tapent encore pour vérifier "
    "que toutes les touches fonctionnent."
)

RUSSIAN_TEXT = (
    "Съешь же ещё этих мягких французских булок, да выпей чаю. Эту фразу часто "
    "используют, чтобы проверить шрифты и клавиатуры."
)


@pytest.fixture
def english_text() -> str:
    """English training sample."""
    return ENGLISH_TEXT


@pytest.fixture
def french_text() -> str:
    """French training sample."""
    return FRENCH_TEXT


@pytest.fixture
def russian_text() -> str:
    """Russian training sample."""
    return RUSSIAN_TEXT


@pytest.fixture
def detector() -> Detector:
    """Detector trained on English, French and Russian samples."""
    detector = Detector()
    detector.add_language("english", ENGLISH_TEXT)
    detector.add_language("french", FRENCH_TEXT)
    detector.add_language("russian", RUSSIAN_TEXT)
    return detector
