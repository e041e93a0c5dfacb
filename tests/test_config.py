"""Tests for configuration module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from ngramdet import create_detector
from ngramdet.config import (
    ConfigurationError,
    DetectionConfig,
    NgramdetConfig,
    ProfilesConfig,
    find_config_file,
    get_default_config,
    load_config,
    load_config_file,
)


class TestNgramdetConfig:
    """Tests for NgramdetConfig schema."""

    def test_default_config(self) -> None:
        """Test that default config can be created."""
        config = NgramdetConfig()
        assert config.detection.minimum_confidence == 0.7
        assert config.profiles.include_defaults is True
        assert config.profiles.profile_files == []
        assert config.profiles.corpus_files == []

    def test_custom_minimum_confidence(self) -> None:
        """Test custom confidence threshold."""
        config = NgramdetConfig(detection=DetectionConfig(minimum_confidence=0.9))
        assert config.detection.minimum_confidence == 0.9

    @pytest.mark.parametrize("value", [0, -1, 1.5, "high", None, False])
    def test_invalid_minimum_confidence_is_healed(self, value: object) -> None:
        """Test that invalid thresholds fall back to the default."""
        config = DetectionConfig(minimum_confidence=value)  # type: ignore[arg-type]
        assert config.minimum_confidence == 0.7

    def test_numeric_string_minimum_confidence(self) -> None:
        """Test that numeric strings from config files are accepted."""
        assert DetectionConfig(minimum_confidence="0.5").minimum_confidence == 0.5  # type: ignore[arg-type]

    def test_to_dict(self) -> None:
        """Test config serialization."""
        data = NgramdetConfig().to_dict()
        assert data["detection"]["minimum_confidence"] == 0.7
        assert data["version"] == "1.0"

    def test_get_default_config(self) -> None:
        """Test get_default_config function."""
        assert isinstance(get_default_config(), NgramdetConfig)


class TestLoadConfig:
    """Tests for configuration loading."""

    def test_load_yaml(self, tmp_path: Path) -> None:
        """Test loading YAML config."""
        config_file = tmp_path / "ngramdet.yaml"
        config_file.write_text(yaml.dump({"detection": {"minimum_confidence": 0.5}}))

        config = load_config(config_file)
        assert config.detection.minimum_confidence == 0.5

    def test_load_toml(self, tmp_path: Path) -> None:
        """Test loading TOML config."""
        config_file = tmp_path / "ngramdet.toml"
        config_file.write_text("[detection]\nminimum_confidence = 0.6\n")

        config = load_config(config_file)
        assert config.detection.minimum_confidence == 0.6

    def test_load_json(self, tmp_path: Path) -> None:
        """Test loading JSON config."""
        config_file = tmp_path / "ngramdet.json"
        config_file.write_text(json.dumps({"profiles": {"include_defaults": False}}))

        config = load_config(config_file)
        assert config.profiles.include_defaults is False

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_config_file(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path: Path) -> None:
        """Test that unknown extensions are rejected."""
        config_file = tmp_path / "ngramdet.ini"
        config_file.write_text("[detection]")

        with pytest.raises(ConfigurationError, match="Unsupported configuration format"):
            load_config_file(config_file)

    def test_unparseable_file(self, tmp_path: Path) -> None:
        """Test that broken files raise ConfigurationError."""
        config_file = tmp_path / "ngramdet.json"
        config_file.write_text("{broken")

        with pytest.raises(ConfigurationError, match="Failed to parse"):
            load_config_file(config_file)

    def test_validation_error(self) -> None:
        """Test that invalid values raise ConfigurationError with details."""
        with pytest.raises(ConfigurationError, match="Invalid configuration") as exc_info:
            load_config(
                config_dict={"profiles": {"profile_files": 42}},
                auto_discover=False,
            )
        assert exc_info.value.errors

    def test_env_var_resolution(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that ${VAR} references are resolved."""
        monkeypatch.setenv("NGRAMDET_PROFILES", "/opt/profiles.json")
        config_file = tmp_path / "ngramdet.yaml"
        config_file.write_text(
            yaml.dump({"profiles": {"profile_files": ["${NGRAMDET_PROFILES}"]}})
        )

        config = load_config(config_file)
        assert config.profiles.profile_files == ["/opt/profiles.json"]

    def test_bare_env_var_and_unknown_var(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that $VAR is resolved and unset variables are left as written."""
        monkeypatch.setenv("NGRAMDET_HOME", "/srv/ngramdet")
        monkeypatch.delenv("NGRAMDET_UNSET", raising=False)
        config_file = tmp_path / "ngramdet.yaml"
        config_file.write_text(
            yaml.dump(
                {
                    "profiles": {
                        "profile_files": ["$NGRAMDET_HOME/profiles.json"],
                        "corpus_files": ["/data/${NGRAMDET_UNSET}.yaml"],
                    }
                }
            )
        )

        config = load_config(config_file)
        assert config.profiles.profile_files == ["/srv/ngramdet/profiles.json"]
        assert config.profiles.corpus_files == ["/data/${NGRAMDET_UNSET}.yaml"]

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file yields the defaults."""
        config_file = tmp_path / "ngramdet.yaml"
        config_file.write_text("")

        assert load_config_file(config_file) == {}
        assert load_config(config_file).detection.minimum_confidence == 0.7

    def test_relative_paths_anchor_to_config_file(self, tmp_path: Path) -> None:
        """Test that relative profile paths resolve against the config's directory."""
        config_file = tmp_path / "ngramdet.yaml"
        config_file.write_text(yaml.dump({"profiles": {"corpus_files": ["languages.yaml"]}}))

        config = load_config(config_file)
        assert config.profiles.corpus_files == [str(tmp_path / "languages.yaml")]

    def test_runtime_overrides(self, tmp_path: Path) -> None:
        """Test that config_dict is deep merged over the file."""
        config_file = tmp_path / "ngramdet.yaml"
        config_file.write_text(
            yaml.dump(
                {
                    "detection": {"minimum_confidence": 0.5},
                    "profiles": {"include_defaults": False},
                }
            )
        )

        config = load_config(config_file, config_dict={"detection": {"minimum_confidence": 0.9}})
        assert config.detection.minimum_confidence == 0.9
        assert config.profiles.include_defaults is False

    def test_auto_discover(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test discovery in the working directory."""
        (tmp_path / ".ngramdet.yml").write_text(yaml.dump({"detection": {"minimum_confidence": 0.4}}))
        monkeypatch.chdir(tmp_path)

        assert find_config_file() == tmp_path / ".ngramdet.yml"
        assert load_config().detection.minimum_confidence == 0.4
        assert load_config(auto_discover=False).detection.minimum_confidence == 0.7

    def test_find_config_file_none(self, tmp_path: Path) -> None:
        """Test that None is returned without config files."""
        assert find_config_file(tmp_path) is None


class TestCreateDetector:
    """Tests for building detectors from configuration."""

    def test_defaults(self) -> None:
        """Test the default detector."""
        detector = create_detector()
        assert len(detector.languages) == 7
        assert detector.minimum_confidence == 0.7

    def test_without_defaults(self, tmp_path: Path, english_text: str) -> None:
        """Test a detector limited to configured corpora."""
        corpus_file = tmp_path / "languages.yaml"
        corpus_file.write_text(yaml.dump({"languages": {"english": {"text": english_text}}}))

        config = NgramdetConfig(
            detection=DetectionConfig(minimum_confidence=0.8),
            profiles=ProfilesConfig(include_defaults=False, corpus_files=[str(corpus_file)]),
        )
        detector = create_detector(config)
        assert [language.name for language in detector.languages] == ["english"]
        assert detector.minimum_confidence == 0.8
        assert detector.closest_language(english_text) == "english"

    def test_profiles_added_to_defaults(self, tmp_path: Path) -> None:
        """Test that JSON profiles are appended after the defaults."""
        profile_file = tmp_path / "profiles.json"
        profile_file.write_text(json.dumps([{"name": "custom", "profile": {"a": 1}}]))

        config = load_config(
            config_dict={"profiles": {"profile_files": [str(profile_file)]}},
            auto_discover=False,
        )
        detector = create_detector(config)
        assert detector.languages[-1].name == "custom"
        assert len(detector.languages) == 8
