"""Customer portal creator (Next.js).

Scaffolds with ``create-next-app`` (App Router, TypeScript, Tailwind) and
adds NextAuth sign-in against Microsoft Entra ID plus a server-side proxy to
the Dataverse Web API.
"""

from __future__ import annotations

from typing import Any, ClassVar

from create_ec_app.creators.base import BaseCreator, TemplateFile
from create_ec_app.models import AppType

PORTAL_DEPENDENCIES: list[str] = [
    "next-auth",
    "@tanstack/react-query",
    "zustand",
]

PORTAL_FILES: list[TemplateFile] = [
    TemplateFile("portal/.env.example.j2", ".env.example", "Created .env.example"),
    TemplateFile("portal/src/lib/auth.ts.j2", "src/lib/auth.ts", "Created auth options in src/lib"),
    TemplateFile(
        "portal/src/lib/dynamics.ts.j2",
        "src/lib/dynamics.ts",
        "Created Dynamics Web API client in src/lib",
    ),
    TemplateFile(
        "portal/src/app/api/auth/[...nextauth]/route.ts.j2",
        "src/app/api/auth/[...nextauth]/route.ts",
        "Created NextAuth route handler",
    ),
    TemplateFile(
        "portal/src/app/api/dynamics/[entitySet]/route.ts.j2",
        "src/app/api/dynamics/[entitySet]/route.ts",
        "Created Dynamics proxy route handler",
    ),
    TemplateFile(
        "portal/src/app/providers.tsx.j2", "src/app/providers.tsx", "Created providers.tsx"
    ),
    TemplateFile(
        "portal/src/app/layout.tsx.j2", "src/app/layout.tsx", "Replaced layout.tsx with providers"
    ),
    TemplateFile("portal/src/app/page.tsx.j2", "src/app/page.tsx", "Replaced page.tsx"),
    TemplateFile(
        "portal/src/components/AuthButton.tsx.j2",
        "src/components/AuthButton.tsx",
        "Created AuthButton.tsx in src/components",
    ),
    TemplateFile("portal/src/middleware.ts.j2", "src/middleware.ts", "Created middleware.ts"),
    TemplateFile("shared/.prettierrc.j2", ".prettierrc", "Added .prettierrc"),
]


class PortalCreator(BaseCreator):
    """Next.js customer portal with authentication and Dynamics integration."""

    app_type: ClassVar[AppType] = AppType.PORTAL

    async def scaffold(self) -> None:
        await self.run_step(
            [
                self.config.npx_command,
                "create-next-app@latest",
                self.project_name,
                "--ts",
                "--tailwind",
                "--eslint",
                "--app",
                "--src-dir",
                "--import-alias",
                "@/*",
                "--use-npm",
                "--yes",
            ],
            "Creating Next.js + TS project...",
            cwd=self.config.output_dir.resolve(),
        )

        await self.run_step(
            [self.config.npm_command, "install", *PORTAL_DEPENDENCIES],
            "Installing dependencies (NextAuth, React Query, Zustand)...",
        )

        def _add_scripts(package: dict[str, Any]) -> None:
            package.setdefault("scripts", {})["typecheck"] = "tsc --noEmit"

        await self.update_json(
            "package.json", _add_scripts, "Updated package.json with typecheck script"
        )
        await self.write_templates(PORTAL_FILES)
