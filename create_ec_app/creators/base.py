"""Base class and shared steps for every application creator.

A creator turns a validated ``ProjectOptions`` into a project directory by
running a fixed, ordered list of steps: shell out to the upstream tool
chain, write template files, patch a couple of generated files, and finally
commit everything to a fresh git repository.  The first failing step aborts
the run by raising a ``CreatorError``; nothing is retried or rolled back.
"""

from __future__ import annotations

import asyncio
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, ClassVar, Optional

from create_ec_app.config import CreatorConfig
from create_ec_app.models import AppType, ProjectOptions
from create_ec_app.templates import TemplateRenderer
from create_ec_app.utils import (
    console,
    ensure_dir,
    format_command,
    is_empty_dir,
    load_json,
    print_failed_step,
    print_step,
    print_warning,
    run_command,
    save_json,
)

CommandRunner = Callable[..., Awaitable[tuple[int, str, str]]]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class CreatorError(Exception):
    """Raised when project creation cannot continue."""


class CommandError(CreatorError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, output: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.output = output
        super().__init__(
            f"Failed to execute command: {format_command(command)} (exit code {returncode})"
        )


class TargetExistsError(CreatorError):
    """Raised when the target directory already exists and is not empty."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Target directory {path} already exists and is not empty")


# ---------------------------------------------------------------------------
# Template file descriptor
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TemplateFile:
    """A template to render and where it lands inside the project."""

    template: str
    target: str
    message: str


# ---------------------------------------------------------------------------
# BaseCreator
# ---------------------------------------------------------------------------


class BaseCreator(ABC):
    """Common machinery shared by all application creators.

    Subclasses set ``app_type`` and implement :meth:`scaffold`.  The external
    command runner is injectable so that the whole step sequence can be
    exercised without ``npm`` or ``git`` on the machine.
    """

    app_type: ClassVar[AppType]

    def __init__(
        self,
        options: ProjectOptions,
        config: Optional[CreatorConfig] = None,
        *,
        renderer: Optional[TemplateRenderer] = None,
        runner: Optional[CommandRunner] = None,
    ) -> None:
        self.options = options
        self.config = config or CreatorConfig()
        self.renderer = renderer or TemplateRenderer()
        self.runner = runner or run_command
        self.project_dir = self.config.project_dir(options.name)
        self.written_files: list[str] = []
        self.updated_files: list[str] = []
        self.commands: list[list[str]] = []

    @property
    def project_name(self) -> str:
        return self.options.name

    # -- Option collection -------------------------------------------------

    @classmethod
    def prompt_options(cls, project_name: str, theme: Optional[str] = None) -> ProjectOptions:
        """Ask the type-specific questions and return the collected options.

        The base implementation has no questions of its own.
        """
        return ProjectOptions(name=project_name, app_type=cls.app_type)

    # -- Orchestration -----------------------------------------------------

    async def create(self) -> Path:
        """Run every step for this application type and return the project path."""
        self.ensure_target_free()
        await asyncio.to_thread(ensure_dir, self.config.output_dir)

        console.print(
            f"\nScaffolding a new project in [green]{self.project_dir}[/green]...\n"
        )
        await self.scaffold()
        await self.init_git()
        return self.project_dir

    @abstractmethod
    async def scaffold(self) -> None:
        """Create the project files (everything except git initialisation)."""

    def next_steps(self) -> list[str]:
        """Lines printed after a successful run."""
        return [f"cd {self.project_name}", "npm run dev", "npm run build"]

    def template_context(self) -> dict[str, Any]:
        """Variables available inside every template of this creator."""
        return {
            "project_name": self.project_name,
            "app_type": self.app_type.value,
        }

    # -- Guards ------------------------------------------------------------

    def ensure_target_free(self) -> None:
        """Refuse to scaffold into an existing, non-empty directory."""
        if not is_empty_dir(self.project_dir):
            raise TargetExistsError(self.project_dir)

    # -- Command steps -----------------------------------------------------

    async def run_step(
        self,
        cmd: list[str],
        message: str,
        cwd: Optional[Path] = None,
    ) -> str:
        """Run one external command behind a spinner.

        Args:
            cmd: Argument list (no shell).
            message: Spinner text, repeated as the success/failure line.
            cwd: Working directory; defaults to the project directory.

        Returns:
            The command's captured stdout.

        Raises:
            CommandError: If the command cannot be started or exits with a
                non-zero status.  A missing executable reports exit code 127.
        """
        workdir = cwd or self.project_dir
        if self.config.verbose:
            console.print(f"  [dim]$ {format_command(cmd)}[/dim]")

        self.commands.append(cmd)
        try:
            with console.status(message):
                returncode, stdout, stderr = await self.runner(
                    cmd, cwd=workdir, timeout=self.config.command_timeout
                )
        except OSError as exc:
            print_failed_step(message)
            raise CommandError(cmd, 127, str(exc)) from exc

        if returncode != 0:
            print_failed_step(message)
            raise CommandError(cmd, returncode, stderr or stdout)

        print_step(message)
        if self.config.verbose and stdout:
            console.print(stdout, style="dim", markup=False, highlight=False)
        return stdout

    async def init_git(self) -> None:
        """Initialise a git repository and create the initial commit."""
        if not self.config.init_git:
            print_warning("  Skipping git initialisation.")
            return

        git = self.config.git_command
        await self.run_step([git, "init"], "Initializing Git repository...")
        await self.run_step([git, "add", "."], "Staging files for initial commit...")
        await self.run_step(
            [git, "commit", "-m", self.config.commit_message],
            "Creating initial commit...",
        )

    # -- File steps --------------------------------------------------------

    async def write_templates(self, files: list[TemplateFile]) -> list[Path]:
        """Render each template into the project, in list order."""
        context = self.template_context()
        written: list[Path] = []
        for item in files:
            target = await self.renderer.render_to_file(
                item.template, self.project_dir / item.target, context
            )
            self._record(self.written_files, target)
            print_step(item.message)
            written.append(target)
        return written

    async def update_json(
        self,
        relative_path: str,
        mutate: Callable[[dict[str, Any]], None],
        message: str,
    ) -> dict[str, Any]:
        """Read a JSON file from the project, let *mutate* edit it, write it back."""
        target = self.project_dir / relative_path

        def _update() -> dict[str, Any]:
            data = load_json(target)
            mutate(data)
            save_json(data, target)
            return data

        data = await asyncio.to_thread(_update)
        self._record(self.updated_files, target)
        print_step(message)
        return data

    async def replace_in_file(
        self,
        relative_path: str,
        pattern: str,
        replacement: str,
        message: str,
    ) -> int:
        """Replace the first regex match of *pattern* in a project file.

        Returns the number of replacements made (0 or 1).  A missing match is
        reported as a warning rather than an error.
        """
        target = self.project_dir / relative_path

        def _replace() -> int:
            content = target.read_text(encoding="utf-8")
            new_content, count = re.subn(
                pattern, lambda _m: replacement, content, count=1, flags=re.DOTALL
            )
            if count:
                target.write_text(new_content, encoding="utf-8")
            return count

        count = await asyncio.to_thread(_replace)
        if count:
            self._record(self.updated_files, target)
            print_step(message)
        else:
            print_warning(f"  Pattern not found in {relative_path}; left unchanged.")
        return count

    # -- Internal ----------------------------------------------------------

    def _record(self, bucket: list[str], path: Path) -> None:
        rel = path.resolve().relative_to(self.project_dir).as_posix()
        if rel not in bucket:
            bucket.append(rel)
