"""Shared pytest fixtures for the create-ec-app test suite.

Provides reusable fixtures for:
- A clean environment (no ``EC_*`` variables leaking in)
- A ``CreatorConfig`` pointed at a temporary output directory
- A fake command runner that records calls and simulates upstream tools
- A factory building any creator wired to the fake runner
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from create_ec_app.config import CreatorConfig
from create_ec_app.creators import BaseCreator, get_creator
from create_ec_app.models import AppType, ProjectOptions, get_kendo_theme


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any ``EC_*`` variables from the test environment."""
    for key in list(os.environ):
        if key.startswith("EC_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config(tmp_path: Path) -> CreatorConfig:
    """Default configuration writing projects under ``tmp_path``."""
    return CreatorConfig(output_dir=tmp_path)


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------

VITE_INDEX_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <title>Vite + React + TS</title>
  </head>
  <body>
    <div id="root"></div>
    <script type="module" src="/src/main.tsx"></script>
  </body>
</html>
"""


class FakeRunner:
    """Async stand-in for ``run_command``.

    Records every call.  For the project generators (``create vite``,
    ``create-next-app``, ``create-expo-app``) it writes the handful of files
    those tools would leave behind, so later steps have something to patch.
    A command whose joined text contains *fail_on* exits with status 1.
    """

    def __init__(self, fail_on: Optional[str] = None) -> None:
        self.fail_on = fail_on
        self.calls: list[tuple[list[str], Path]] = []

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _ in self.calls]

    async def __call__(
        self,
        cmd: list[str],
        cwd: Optional[Path] = None,
        timeout: int = 600,
        **_: Any,
    ) -> tuple[int, str, str]:
        workdir = Path(cwd) if cwd else Path.cwd()
        self.calls.append((list(cmd), workdir))
        joined = " ".join(cmd)
        if self.fail_on and self.fail_on in joined:
            return (1, "", f"simulated failure: {joined}")
        self._simulate(cmd, workdir)
        return (0, f"ran {joined}", "")

    def _simulate(self, cmd: list[str], cwd: Path) -> None:
        if "vite@latest" in cmd:
            root = cwd / cmd[cmd.index("vite@latest") + 1]
            _write_json(root / "package.json", {
                "name": root.name,
                "type": "module",
                "scripts": {"dev": "vite", "build": "tsc -b && vite build"},
            })
            _write(root / "index.html", VITE_INDEX_HTML)
            _write(root / "vite.config.ts", "export default {};\n")
            _write(root / "src" / "App.tsx", "export default function App() {}\n")
            _write(root / "src" / "main.tsx", "// vite main\n")
            _write(root / "src" / "index.css", ":root {}\n")
            _write(root / "src" / "App.css", "#root {}\n")
        elif "create-next-app@latest" in cmd:
            root = cwd / cmd[cmd.index("create-next-app@latest") + 1]
            _write_json(root / "package.json", {
                "name": root.name,
                "scripts": {"dev": "next dev", "build": "next build"},
            })
            _write(root / "src" / "app" / "layout.tsx", "// next layout\n")
            _write(root / "src" / "app" / "page.tsx", "// next page\n")
            _write(root / "src" / "app" / "globals.css", '@import "tailwindcss";\n')
        elif "create-expo-app@latest" in cmd:
            root = cwd / cmd[cmd.index("create-expo-app@latest") + 1]
            _write_json(root / "package.json", {
                "name": root.name,
                "scripts": {"start": "expo start"},
            })
            _write_json(root / "app.json", {"expo": {"name": root.name, "slug": root.name}})
            _write(root / "App.tsx", "// expo app\n")


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _write_json(path: Path, data: dict[str, Any]) -> None:
    _write(path, json.dumps(data, indent=2))


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A fake runner on which every command succeeds."""
    return FakeRunner()


@pytest.fixture
def failing_runner() -> Callable[[str], FakeRunner]:
    """Factory for a fake runner that fails the first command containing *fail_on*."""
    return FakeRunner


# ---------------------------------------------------------------------------
# Creator factory
# ---------------------------------------------------------------------------

@pytest.fixture
def make_creator(
    config: CreatorConfig, fake_runner: FakeRunner
) -> Callable[..., BaseCreator]:
    """Build a creator for *app_type* wired to the fake runner."""

    def _make(
        app_type: AppType,
        name: str = "my-app",
        theme: Optional[str] = None,
        runner: Optional[FakeRunner] = None,
        creator_config: Optional[CreatorConfig] = None,
    ) -> BaseCreator:
        options = ProjectOptions(
            name=name,
            app_type=app_type,
            kendo_theme=get_kendo_theme(theme) if theme else None,
        )
        creator_cls = get_creator(app_type)
        return creator_cls(
            options,
            creator_config or config,
            runner=runner or fake_runner,
        )

    return _make
