"""Lazily computed rank table of a text under detection."""

from __future__ import annotations

from functools import cached_property

from ngramdet.ngram import N_DEPTH, create_occurrence_map, create_rank_lookup_map


class LazyRankTable:
    """Rank table of one text, computed on first access.

    A new instance is created for every detection call and shared by all
    comparators of that call, so the text is profiled at most once and never
    reused across calls.

    Example:
        >>> lookup = LazyRankTable("hello")
        >>> lookup.computed
        False
        >>> lookup()["l"]
        1
        >>> lookup.computed
        True
    """

    def __init__(self, text: str, depth: int = N_DEPTH) -> None:
        self._text = text
        self._depth = depth

    @cached_property
    def table(self) -> dict[str, int]:
        """Return the rank table of the text."""
        occurrences = create_occurrence_map(self._text, self._depth)
        return create_rank_lookup_map(occurrences)

    @property
    def computed(self) -> bool:
        """Check whether the table has been computed yet."""
        return "table" in self.__dict__

    def __call__(self) -> dict[str, int]:
        return self.table
