"""Shared Vite + React + Kendo UI + Tailwind scaffolding.

Both the Dynamics 365 webresource template and the Power Pages template
start from ``create-vite``'s ``react-ts`` template, install the same
dependency set (plus the chosen Kendo theme) and wire Tailwind to the Kendo
design tokens.  Only the files written afterwards differ.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from create_ec_app.creators.base import BaseCreator, TemplateFile
from create_ec_app.models import KENDO_THEMES, KendoTheme, ProjectOptions, get_kendo_theme
from create_ec_app.prompts import ask_kendo_theme

KENDO_DEPENDENCIES: list[str] = [
    "@progress/kendo-react-buttons",
    "@progress/kendo-licensing",
    "tailwindcss@^4",
    "@tailwindcss/vite@^4",
    "@tanstack/react-query",
    "zustand",
    "@types/xrm",
    "@types/node",
]

BUILD_DEV_SCRIPT = "tsc -b && vite build --mode development"

TAILWIND_FILES: list[TemplateFile] = [
    TemplateFile("shared/kendo-tw-preset.js.j2", "kendo-tw-preset.js", "Created kendo-tw-preset.js"),
    TemplateFile(
        "shared/tailwind.config.js.j2",
        "tailwind.config.js",
        "Created tailwind.config.js with Kendo preset",
    ),
]

CSS_FILES: list[TemplateFile] = [
    TemplateFile("shared/index.css.j2", "src/index.css", "Updated CSS entry point"),
    TemplateFile("shared/App.css.j2", "src/App.css", "Cleared App.css"),
]

PRETTIER_FILE = TemplateFile("shared/.prettierrc.j2", ".prettierrc", "Added .prettierrc")


class KendoViteCreator(BaseCreator):
    """Base for templates built on Vite, React, Kendo UI and Tailwind."""

    page_title: ClassVar[str] = "EC | Vite + React + TS + Kendo UI + Tailwind"

    def __init__(self, options: ProjectOptions, *args: Any, **kwargs: Any) -> None:
        if options.kendo_theme is None:
            options = options.model_copy(update={"kendo_theme": KENDO_THEMES[0]})
        super().__init__(options, *args, **kwargs)

    @classmethod
    def prompt_options(cls, project_name: str, theme: Optional[str] = None) -> ProjectOptions:
        kendo_theme = get_kendo_theme(theme) if theme else ask_kendo_theme()
        return ProjectOptions(name=project_name, app_type=cls.app_type, kendo_theme=kendo_theme)

    @property
    def kendo_theme(self) -> KendoTheme:
        assert self.options.kendo_theme is not None  # set in __init__
        return self.options.kendo_theme

    def template_context(self) -> dict[str, Any]:
        return {
            **super().template_context(),
            "kendo_theme_package": self.kendo_theme.package,
        }

    def next_steps(self) -> list[str]:
        steps = super().next_steps()
        steps.insert(
            1,
            "[yellow]npx kendo-ui-license activate[/yellow] "
            "[dim](IMPORTANT: Activate your Kendo license)[/dim]",
        )
        return steps

    def dependencies(self) -> list[str]:
        """The ``npm install`` argument list, theme package last."""
        return [*KENDO_DEPENDENCIES, self.kendo_theme.package]

    # -- Shared steps ------------------------------------------------------

    async def scaffold_vite(self) -> None:
        """Create the Vite project, add ``build:dev`` and install dependencies."""
        npm = self.config.npm_command
        await self.run_step(
            [npm, "create", "vite@latest", self.project_name, "--", "--template", "react-ts"],
            "Creating Vite + React + TS project...",
            cwd=self.config.output_dir.resolve(),
        )

        def _add_scripts(package: dict[str, Any]) -> None:
            package.setdefault("scripts", {})["build:dev"] = BUILD_DEV_SCRIPT

        await self.update_json(
            "package.json", _add_scripts, "Updated package.json with custom build script"
        )

        await self.run_step(
            [npm, "install", *self.dependencies()],
            f"Installing dependencies (Theme: {self.kendo_theme.short_name})...",
        )

    async def update_page_title(self) -> None:
        await self.replace_in_file(
            "index.html",
            r"<title>.*?</title>",
            f"<title>{self.page_title}</title>",
            "Updated index.html",
        )
