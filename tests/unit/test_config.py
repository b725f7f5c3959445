# tests/unit/test_config.py

"""Tests for building the runtime Config."""

from datetime import timedelta
from pathlib import Path

import attrs
import pytest

from cargo_testify.config import DEFAULT_IGNORE_DURATION, Config, load_config
from cargo_testify.exceptions import ConfigurationError


class TestLoadConfig:
    def test_defaults(self, cargo_project: Path):
        config = load_config(project_dir=cargo_project)

        assert config.project_dir == cargo_project
        assert config.ignore_duration == DEFAULT_IGNORE_DURATION == timedelta(milliseconds=300)
        assert config.extra_args == ()
        assert config.command == "cargo"
        assert config.echo_output is True
        assert config.notifier == "auto"

    def test_defaults_to_current_directory(self, cargo_project: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(cargo_project)
        assert load_config().project_dir == cargo_project

    def test_relative_directory_is_resolved(self, cargo_project: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(cargo_project.parent)
        config = load_config(project_dir=cargo_project.name)
        assert config.project_dir.is_absolute()
        assert config.project_dir == cargo_project

    def test_custom_values(self, cargo_project: Path):
        config = load_config(
            project_dir=cargo_project,
            ignore_duration_ms=1500,
            extra_args=["--release", "--", "--nocapture"],
            command="cross",
            echo_output=False,
            notifier="console",
        )

        assert config.ignore_duration == timedelta(seconds=1.5)
        assert config.extra_args == ("--release", "--", "--nocapture")
        assert config.test_command == ["cross", "test", "--release", "--", "--nocapture"]
        assert config.echo_output is False

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="does not exist"):
            load_config(project_dir=tmp_path / "nope")

    def test_file_instead_of_directory(self, cargo_project: Path):
        with pytest.raises(ConfigurationError, match="not a directory"):
            load_config(project_dir=cargo_project / "Cargo.toml")

    def test_directory_without_manifest_is_accepted(self, tmp_path: Path):
        config = load_config(project_dir=tmp_path)
        assert config.project_dir == tmp_path.resolve()

    def test_negative_ignore_duration(self, cargo_project: Path):
        with pytest.raises(ConfigurationError, match="ignore_duration"):
            load_config(project_dir=cargo_project, ignore_duration_ms=-1)

    def test_empty_command(self, cargo_project: Path):
        with pytest.raises(ConfigurationError, match="command"):
            load_config(project_dir=cargo_project, command="  ")


class TestConfigModel:
    def test_is_immutable(self, config: Config):
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            config.command = "other"  # type: ignore[misc]

    def test_test_command_always_starts_with_test(self, config: Config):
        assert config.test_command[:2] == ["cargo", "test"]
