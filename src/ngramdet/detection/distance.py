"""Out-of-place distance between rank tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

# Only the most frequent n-grams of the first table take part in a comparison
RANK_CUTOFF = 300


def get_distance(map_a: Mapping[str, int], map_b: Mapping[str, int], max_dist: int) -> int:
    """Calculate the out-of-place distance of map_a to map_b.

    Only entries of map_a ranked at most RANK_CUTOFF are considered. Each of
    them adds the absolute rank difference to its counterpart in map_b,
    clamped to max_dist, or max_dist when map_b lacks the n-gram.

    Args:
        map_a: Rank table of the unknown text
        map_b: Rank table of the reference language
        max_dist: Maximum penalty for a single n-gram

    Returns:
        Total distance, lower means more similar
    """
    result = 0
    for key, rank_a in map_a.items():
        if rank_a > RANK_CUTOFF:
            continue
        rank_b = map_b.get(key)
        if rank_b is None:
            result += max_dist
        else:
            result += min(abs(rank_b - rank_a), max_dist)
    return result
