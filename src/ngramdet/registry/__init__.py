"""Language profile registry module."""

from ngramdet.registry.registry import (
    LanguageRegistry,
    ProfileError,
    create_default_registry,
)

__all__ = [
    "LanguageRegistry",
    "ProfileError",
    "create_default_registry",
]
