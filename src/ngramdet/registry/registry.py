"""Registry of named language profiles."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from ngramdet.detection.language import Language, analyze

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class ProfileError(Exception):
    """Raised when language profiles or corpora cannot be loaded."""

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class LanguageRegistry:
    """Ordered collection of language profiles.

    Entries are kept in registration order and are not deduplicated by name.

    Example:
        >>> registry = LanguageRegistry()
        >>> language = registry.register_text("english", "the cat sat on the mat")
        >>> registry.list_languages()
        ['english']
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._languages: list[Language] = []

    def __len__(self) -> int:
        return len(self._languages)

    def __iter__(self) -> Iterator[Language]:
        return iter(list(self._languages))

    @property
    def languages(self) -> list[Language]:
        """Return a copy of the registered languages."""
        return list(self._languages)

    def register(self, language: Language) -> None:
        """Register a language profile.

        Args:
            language: Language to append
        """
        self._languages.append(language)
        logger.debug("Registered language profile: %s", language.name)

    def register_text(self, name: str, text: str) -> Language:
        """Analyze training text and register the resulting profile.

        Args:
            name: Name of the language
            text: Training text written in the language

        Returns:
            The registered Language
        """
        language = analyze(text, name)
        self.register(language)
        return language

    def unregister(self, name: str) -> int:
        """Remove every language registered under name.

        Returns:
            Number of removed entries
        """
        before = len(self._languages)
        self._languages = [lang for lang in self._languages if lang.name != name]
        removed = before - len(self._languages)
        if removed:
            logger.debug("Unregistered %d profile(s) named %s", removed, name)
        return removed

    def get(self, name: str) -> Language | None:
        """Get the first language registered under name."""
        for language in self._languages:
            if language.name == name:
                return language
        return None

    def list_languages(self) -> list[str]:
        """List the names of all registered languages in order."""
        return [language.name for language in self._languages]

    def load_defaults(self) -> None:
        """Register the bundled default languages."""
        from ngramdet.registry.samples import DEFAULT_LANGUAGES, read_sample

        for name in DEFAULT_LANGUAGES:
            self.register_text(name, read_sample(name))

        logger.info("Loaded %d default languages", len(DEFAULT_LANGUAGES))

    def load_from_json(self, path: str | Path) -> None:
        """Load pre-built profiles from a JSON file.

        JSON format:
        ```json
        [{"name": "english", "profile": {"e": 1, "t": 2, "_t": 3}}]
        ```

        Nothing is registered if any entry is invalid.

        Args:
            path: Path to JSON file

        Raises:
            ProfileError: If the file cannot be read or decoded
        """
        path = Path(path)

        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ProfileError(f"Could not read profiles from {path}: {e}", path=path) from e

        if not isinstance(data, list):
            raise ProfileError(f"Expected a list of profiles in {path}", path=path)

        languages: list[Language] = []
        for entry in data:
            if not isinstance(entry, dict):
                raise ProfileError(f"Expected an object per profile in {path}", path=path)
            try:
                languages.append(Language.from_dict(entry))
            except ValueError as e:
                raise ProfileError(f"Invalid profile in {path}: {e}", path=path) from e

        for language in languages:
            self.register(language)

        logger.info("Loaded %d profiles from %s", len(languages), path)

    def dump_json(self, path: str | Path) -> None:
        """Write all registered profiles to a JSON file.

        Args:
            path: Destination path, overwritten if it exists
        """
        path = Path(path)
        data = [language.to_dict() for language in self._languages]

        with path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)

        logger.info("Wrote %d profiles to %s", len(data), path)

    def load_from_yaml(self, path: str | Path) -> None:
        """Analyze training corpora listed in a YAML file.

        YAML format:
        ```yaml
        languages:
          english:
            text: "The quick brown fox jumps over the lazy dog."
          french:
            file: corpora/french.txt
        ```

        Relative ``file`` entries are resolved against the YAML file's
        directory. Nothing is registered if any entry is invalid.

        Args:
            path: Path to YAML file

        Raises:
            ProfileError: If the file or a referenced corpus cannot be read
        """
        path = Path(path)

        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ProfileError(f"Could not read corpora from {path}: {e}", path=path) from e

        if not data:
            return

        entries = data.get("languages", {}) if isinstance(data, dict) else None
        if not isinstance(entries, dict):
            raise ProfileError(f"Expected a 'languages' mapping in {path}", path=path)

        corpora = [(name, self._read_corpus(name, entry, path)) for name, entry in entries.items()]
        for name, text in corpora:
            self.register_text(str(name), text)

        logger.info("Loaded %d corpora from %s", len(corpora), path)

    def _read_corpus(self, name: str, entry: Any, source: Path) -> str:
        """Get the training text of one YAML corpus entry."""
        if isinstance(entry, dict) and isinstance(entry.get("text"), str):
            return entry["text"]

        if isinstance(entry, dict) and entry.get("file"):
            corpus_path = Path(entry["file"]).expanduser()
            if not corpus_path.is_absolute():
                corpus_path = source.parent / corpus_path
            try:
                return corpus_path.read_text(encoding="utf-8")
            except OSError as e:
                msg = f"Could not read corpus for '{name}' from {corpus_path}: {e}"
                raise ProfileError(msg, path=corpus_path) from e

        raise ProfileError(f"Corpus '{name}' in {source} needs 'text' or 'file'", path=source)


def create_default_registry() -> LanguageRegistry:
    """Create a registry loaded with the bundled default languages.

    Every call returns a new registry, so callers may add or remove
    languages without affecting each other.

    Returns:
        LanguageRegistry with arabic, english, french, german, hebrew,
        russian and turkish profiles
    """
    registry = LanguageRegistry()
    registry.load_defaults()
    return registry
