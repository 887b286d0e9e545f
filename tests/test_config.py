"""Unit tests for CreatorConfig (create_ec_app.config).

Tests cover:
- Defaults
- project_dir resolution
- Validation
- save/load round trip
- from_env
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from create_ec_app.config import DEFAULT_COMMIT_MESSAGE, CreatorConfig

pytestmark = pytest.mark.unit


class TestDefaults:
    def test_default_values(self):
        config = CreatorConfig()
        assert config.output_dir == Path(".")
        assert config.npm_command == "npm"
        assert config.npx_command == "npx"
        assert config.git_command == "git"
        assert config.command_timeout == 600
        assert config.init_git is True
        assert config.commit_message == DEFAULT_COMMIT_MESSAGE
        assert config.verbose is False

    def test_commit_message(self):
        assert DEFAULT_COMMIT_MESSAGE == "Initial commit from create-ec-app"

    def test_timeout_minimum(self):
        with pytest.raises(ValidationError):
            CreatorConfig(command_timeout=5)


class TestProjectDir:
    def test_is_absolute(self, tmp_path: Path):
        config = CreatorConfig(output_dir=tmp_path)
        assert config.project_dir("my-app") == (tmp_path / "my-app").resolve()
        assert config.project_dir("my-app").is_absolute()

    def test_relative_output_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        config = CreatorConfig(output_dir=Path("projects"))
        assert config.project_dir("x") == (tmp_path / "projects" / "x").resolve()


class TestSaveLoad:
    def test_round_trip(self, tmp_path: Path):
        config = CreatorConfig(output_dir=tmp_path, npm_command="pnpm", init_git=False)
        path = config.save(tmp_path / "nested" / "config.json")
        assert path.exists()
        loaded = CreatorConfig.load(path)
        assert loaded == config

    def test_saved_file_is_json(self, tmp_path: Path):
        path = CreatorConfig(command_timeout=30).save(tmp_path / "config.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["command_timeout"] == 30


class TestFromEnv:
    def test_no_env_gives_defaults(self):
        assert CreatorConfig.from_env() == CreatorConfig()

    def test_reads_all_variables(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("EC_OUTPUT_DIR", str(tmp_path))
        monkeypatch.setenv("EC_NPM_COMMAND", "npm.cmd")
        monkeypatch.setenv("EC_NPX_COMMAND", "npx.cmd")
        monkeypatch.setenv("EC_GIT_COMMAND", "/usr/bin/git")
        monkeypatch.setenv("EC_COMMAND_TIMEOUT", "120")
        monkeypatch.setenv("EC_COMMIT_MESSAGE", "chore: scaffold")
        monkeypatch.setenv("EC_VERBOSE", "true")

        config = CreatorConfig.from_env()
        assert config.output_dir == tmp_path
        assert config.npm_command == "npm.cmd"
        assert config.npx_command == "npx.cmd"
        assert config.git_command == "/usr/bin/git"
        assert config.command_timeout == 120
        assert config.commit_message == "chore: scaffold"
        assert config.verbose is True

    @pytest.mark.parametrize("value,expected", [("1", False), ("yes", False), ("0", True), ("no", True)])
    def test_skip_git(self, monkeypatch: pytest.MonkeyPatch, value, expected):
        monkeypatch.setenv("EC_SKIP_GIT", value)
        assert CreatorConfig.from_env().init_git is expected

    def test_invalid_timeout(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("EC_COMMAND_TIMEOUT", "abc")
        with pytest.raises(ValueError):
            CreatorConfig.from_env()
