"""Character n-gram extraction, counting and ranking."""

from __future__ import annotations

import unicodedata
from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

# Longest n-gram produced; depth 1 would only create single-letter tokens
N_DEPTH = 4

PADDING = "_"

# Nonspacing and spacing combining marks (vowel points, viramas) belong to their word
_MARK_CATEGORIES = frozenset({"Mn", "Mc"})


def _is_word_char(char: str) -> bool:
    return char.isalpha() or unicodedata.category(char) in _MARK_CATEGORIES


def clean_text(text: str) -> list[str]:
    """Lowercase text and split it into tokens of letters and combining marks.

    Args:
        text: Raw input text

    Returns:
        List of tokens, empty for text without letters
    """
    return "".join(char if _is_word_char(char) else " " for char in text.lower()).split()


def create_occurrence_map(text: str, depth: int = N_DEPTH) -> dict[str, int]:
    """Count every n-gram of length 1..depth found in text.

    Each token is padded with ``n - 1`` underscores on both sides for the
    n-grams of length ``n``, so word starts and endings get their own grams.

    Args:
        text: Text to analyze
        depth: Maximum n-gram length

    Returns:
        Mapping of n-gram to occurrence count
    """
    occurrences: Counter[str] = Counter()

    for token in clean_text(text):
        for n in range(1, depth + 1):
            padding = PADDING * (n - 1)
            padded = f"{padding}{token}{padding}"
            for start in range(len(padded) - n + 1):
                occurrences[padded[start : start + n]] += 1

    return dict(occurrences)


def create_rank_lookup_map(occurrences: Mapping[str, int]) -> dict[str, int]:
    """Convert an occurrence table into a dense rank table.

    The most frequent n-gram gets rank 1. Equal counts keep the order in
    which the n-grams were first seen.

    Args:
        occurrences: Mapping of n-gram to occurrence count

    Returns:
        Mapping of n-gram to rank in 1..len(occurrences)
    """
    ordered = sorted(occurrences.items(), key=lambda item: item[1], reverse=True)
    return {gram: rank for rank, (gram, _count) in enumerate(ordered, start=1)}


def create_rank_table(text: str, depth: int = N_DEPTH) -> dict[str, int]:
    """Build the rank table of text in one step."""
    return create_rank_lookup_map(create_occurrence_map(text, depth))
