"""create-ec-app configuration.

Typed settings for the external tool chain and the output location. Settings
use a Pydantic v2 model so they are validated at construction time and can be
read from environment variables or a JSON file without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


DEFAULT_COMMIT_MESSAGE = "Initial commit from create-ec-app"

_TRUTHY = {"1", "true", "yes", "on"}


class CreatorConfig(BaseModel):
    """Global create-ec-app configuration.

    Created once by the CLI entry point and passed to the selected creator.
    """

    output_dir: Path = Field(default=Path("."), description="Parent of the new project directory")
    npm_command: str = Field(default="npm")
    npx_command: str = Field(default="npx")
    git_command: str = Field(default="git")
    command_timeout: int = Field(
        default=600, ge=10, description="Per-command timeout in seconds"
    )
    init_git: bool = Field(default=True, description="Create a git repo and initial commit")
    commit_message: str = Field(default=DEFAULT_COMMIT_MESSAGE)
    verbose: bool = Field(default=False, description="Echo commands and their output")

    def project_dir(self, project_name: str) -> Path:
        """Absolute path of the directory a project named *project_name* lands in."""
        return (self.output_dir / project_name).resolve()

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "CreatorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "CreatorConfig":
        """Build a ``CreatorConfig`` from environment variables.

        Recognised variables (all optional):
            EC_OUTPUT_DIR, EC_NPM_COMMAND, EC_NPX_COMMAND, EC_GIT_COMMAND,
            EC_COMMAND_TIMEOUT, EC_SKIP_GIT, EC_COMMIT_MESSAGE, EC_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EC_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["EC_OUTPUT_DIR"])
        if os.environ.get("EC_NPM_COMMAND"):
            kwargs["npm_command"] = os.environ["EC_NPM_COMMAND"]
        if os.environ.get("EC_NPX_COMMAND"):
            kwargs["npx_command"] = os.environ["EC_NPX_COMMAND"]
        if os.environ.get("EC_GIT_COMMAND"):
            kwargs["git_command"] = os.environ["EC_GIT_COMMAND"]
        if os.environ.get("EC_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["EC_COMMAND_TIMEOUT"])
        if os.environ.get("EC_SKIP_GIT"):
            kwargs["init_git"] = os.environ["EC_SKIP_GIT"].strip().lower() not in _TRUTHY
        if os.environ.get("EC_COMMIT_MESSAGE"):
            kwargs["commit_message"] = os.environ["EC_COMMIT_MESSAGE"]
        if os.environ.get("EC_VERBOSE"):
            kwargs["verbose"] = os.environ["EC_VERBOSE"].strip().lower() in _TRUTHY

        return cls(**kwargs)
