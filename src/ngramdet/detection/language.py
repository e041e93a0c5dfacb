"""Language profiles built from training text."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ngramdet.detection import DetectionResult
from ngramdet.detection.distance import RANK_CUTOFF, get_distance
from ngramdet.ngram import create_rank_table

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ngramdet.detection import RankTableProvider


@dataclass(frozen=True, slots=True, eq=False)
class Language:
    """A named rank table of character n-grams.

    Two languages sharing a name are still independent entries; equality is
    identity.

    Attributes:
        name: Name reported when this language is detected
        profile: Read-only mapping of n-gram to rank
    """

    name: str
    profile: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "profile", MappingProxyType(dict(self.profile)))

    def compare_to(self, lookup: RankTableProvider, original_text: str) -> DetectionResult:
        """Score a text against this language.

        The out-of-place distance of the text's rank table to this profile is
        scaled by the worst possible distance and reported in percent.

        Args:
            lookup: Accessor for the text's rank table
            original_text: The unmodified text, unused by n-gram profiles

        Returns:
            DetectionResult with this language's name
        """
        table = lookup()
        input_size = min(len(table), RANK_CUTOFF)
        profile_size = len(self.profile)
        max_possible = profile_size * input_size
        if max_possible == 0:
            return DetectionResult(name=self.name, confidence=0)

        distance = get_distance(table, self.profile, profile_size)
        relative = 1 - distance / max_possible
        return DetectionResult(name=self.name, confidence=int(relative * 100))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {"name": self.name, "profile": dict(self.profile)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Language:
        """Create a language from its serialized form.

        Accepts both ``name``/``profile`` and ``Name``/``Profile`` keys.

        Raises:
            ValueError: If the data is not a valid serialized language
        """
        name = data.get("name", data.get("Name"))
        profile = data.get("profile", data.get("Profile"))

        if not isinstance(name, str) or not name:
            msg = "language entry needs a non-empty 'name'"
            raise ValueError(msg)
        if not isinstance(profile, dict):
            msg = f"language '{name}' needs a 'profile' mapping of n-gram to rank"
            raise ValueError(msg)
        for gram, rank in profile.items():
            if not isinstance(gram, str) or isinstance(rank, bool) or not isinstance(rank, int):
                msg = f"language '{name}' has an invalid profile entry: {gram!r}: {rank!r}"
                raise ValueError(msg)
            if rank < 1:
                msg = f"language '{name}' has a non-positive rank for {gram!r}"
                raise ValueError(msg)

        return cls(name=name, profile=profile)


def analyze(text: str, name: str) -> Language:
    """Build a language profile from training text.

    Args:
        text: Representative text written in the language
        name: Name of the language

    Returns:
        Language holding the rank table of text
    """
    return Language(name=name, profile=create_rank_table(text))
