"""N-gram profiling module."""

from ngramdet.ngram.profile import (
    N_DEPTH,
    clean_text,
    create_occurrence_map,
    create_rank_lookup_map,
    create_rank_table,
)

__all__ = [
    "N_DEPTH",
    "clean_text",
    "create_occurrence_map",
    "create_rank_lookup_map",
    "create_rank_table",
]
