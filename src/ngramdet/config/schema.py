"""Configuration schema definitions using Pydantic models."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_MINIMUM_CONFIDENCE = 0.7


def heal_minimum_confidence(value: Any) -> float:
    """Return value as a threshold in (0, 1], or the default if it is not one."""
    try:
        threshold = float(value)
    except (TypeError, ValueError):
        threshold = None

    if isinstance(value, bool) or threshold is None or not 0 < threshold <= 1:
        logger.debug("Replacing minimum confidence %r with %s", value, DEFAULT_MINIMUM_CONFIDENCE)
        return DEFAULT_MINIMUM_CONFIDENCE
    return threshold


class DetectionConfig(BaseModel):
    """Configuration for language detection."""

    minimum_confidence: float = Field(
        default=DEFAULT_MINIMUM_CONFIDENCE,
        description="Minimum confidence in (0, 1] for a language to be reported",
    )

    @field_validator("minimum_confidence", mode="before")
    @classmethod
    def validate_minimum_confidence(cls, v: Any) -> float:
        """Replace out-of-range thresholds with the default."""
        return heal_minimum_confidence(v)


class ProfilesConfig(BaseModel):
    """Configuration for the languages a detector knows."""

    include_defaults: bool = Field(
        default=True,
        description="Register the bundled default languages",
    )
    profile_files: list[str] = Field(
        default_factory=list,
        description="JSON files with pre-built language profiles",
    )
    corpus_files: list[str] = Field(
        default_factory=list,
        description="YAML files listing training corpora per language",
    )


class NgramdetConfig(BaseModel):
    """Root configuration for ngramdet."""

    version: str = Field(
        default="1.0",
        description="Configuration schema version",
    )
    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    profiles: ProfilesConfig = Field(default_factory=ProfilesConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()
