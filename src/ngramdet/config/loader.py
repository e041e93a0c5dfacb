"""Reading, merging and validating ngramdet configuration files."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from ngramdet.config.schema import NgramdetConfig

if TYPE_CHECKING:
    from collections.abc import Callable


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be read or fails validation."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


def _read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def _read_toml(path: Path) -> Any:
    return tomllib.loads(path.read_text(encoding="utf-8"))


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


_READERS: dict[str, Callable[[Path], Any]] = {
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".toml": _read_toml,
    ".json": _read_json,
}

# Searched in this order by find_config_file
CONFIG_FILE_NAMES = [
    "ngramdet.yaml",
    "ngramdet.yml",
    "ngramdet.toml",
    "ngramdet.json",
    ".ngramdet.yaml",
    ".ngramdet.yml",
]

_PATH_LISTS = ("profile_files", "corpus_files")


def _expand_env(data: Any) -> Any:
    """Expand $VAR and ${VAR} in every string; unknown variables stay as written."""
    if isinstance(data, str):
        return os.path.expandvars(data)
    if isinstance(data, dict):
        return {key: _expand_env(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_expand_env(item) for item in data]
    return data


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load configuration from a YAML, TOML or JSON file.

    Relative profile and corpus paths are resolved against the file's
    directory.

    Args:
        path: Path to configuration file

    Returns:
        Parsed configuration dictionary, empty for an empty file

    Raises:
        ConfigurationError: If the file is missing or cannot be parsed
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ConfigurationError(f"Unsupported configuration format: {path.suffix}")

    try:
        data = reader(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to parse configuration file: {e}") from e

    if not isinstance(data, dict):
        return {}
    return _anchor_paths(_expand_env(data), path.parent)


def _anchor_paths(data: dict[str, Any], base: Path) -> dict[str, Any]:
    profiles = data.get("profiles")
    if not isinstance(profiles, dict):
        return data

    anchored = dict(profiles)
    for key in _PATH_LISTS:
        if isinstance(profiles.get(key), list):
            anchored[key] = [_anchor(entry, base) for entry in profiles[key]]
    return {**data, "profiles": anchored}


def _anchor(entry: Any, base: Path) -> Any:
    if not isinstance(entry, str) or Path(entry).expanduser().is_absolute():
        return entry
    return str(base / entry)


def find_config_file(directory: str | Path | None = None) -> Path | None:
    """Return the first known configuration file in directory, if any.

    Args:
        directory: Directory to search (defaults to current working directory)
    """
    directory = Path.cwd() if directory is None else Path(directory)
    return next(
        (directory / name for name in CONFIG_FILE_NAMES if (directory / name).exists()),
        None,
    )


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    path: str | Path | None = None,
    *,
    config_dict: dict[str, Any] | None = None,
    auto_discover: bool = True,
) -> NgramdetConfig:
    """Load and validate ngramdet configuration.

    Built-in defaults are overridden by the configuration file (the given
    path, or one found in the working directory when auto_discover is set),
    which in turn is overridden by config_dict.

    Args:
        path: Path to configuration file (optional)
        config_dict: Values merged over the file contents
        auto_discover: Search the working directory when path is None

    Returns:
        Validated NgramdetConfig instance

    Raises:
        ConfigurationError: If the merged values fail validation
    """
    if path is None and auto_discover:
        path = find_config_file()

    data = load_config_file(path) if path is not None else {}
    if config_dict:
        data = _merge(data, config_dict)

    try:
        return NgramdetConfig(**data)
    except ValidationError as e:
        errors: list[dict[str, Any]] = [dict(err) for err in e.errors()]
        details = "\n".join(f"  - {err['loc']}: {err['msg']}" for err in errors)
        raise ConfigurationError(f"Invalid configuration:\n{details}", errors=errors) from e


def get_default_config() -> NgramdetConfig:
    """Return a configuration made only of defaults, ignoring any files."""
    return NgramdetConfig()
