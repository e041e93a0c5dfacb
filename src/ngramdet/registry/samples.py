"""Bundled training corpora for the default languages."""

from __future__ import annotations

from pathlib import Path

CORPORA_DIR = Path(__file__).resolve().parent / "corpora"

# Registration order of the default languages
DEFAULT_LANGUAGES = ("arabic", "english", "french", "german", "hebrew", "russian", "turkish")


def read_sample(name: str) -> str:
    """Read the bundled training corpus of a default language.

    Args:
        name: One of DEFAULT_LANGUAGES

    Returns:
        The corpus text

    Raises:
        KeyError: If name is not a default language
    """
    if name not in DEFAULT_LANGUAGES:
        raise KeyError(name)
    return (CORPORA_DIR / f"{name}.txt").read_text(encoding="utf-8")
