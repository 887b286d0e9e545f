"""Dynamics 365 webresource app creator.

Same Vite + Kendo + Tailwind base as Power Pages, but the build emits
relative, unhashed asset names so the output can be uploaded as
webresources, and the app talks to the hosting form through ``Xrm``.
"""

from __future__ import annotations

from typing import ClassVar

from create_ec_app.creators.base import TemplateFile
from create_ec_app.creators.kendo import (
    CSS_FILES,
    PRETTIER_FILE,
    TAILWIND_FILES,
    KendoViteCreator,
)
from create_ec_app.models import AppType

WEBRESOURCE_FILES: list[TemplateFile] = [
    *TAILWIND_FILES,
    TemplateFile(
        "webresource/vite.config.ts.j2",
        "vite.config.ts",
        "Replaced vite.config.ts with webresource build config",
    ),
    *CSS_FILES,
    TemplateFile("webresource/src/App.tsx.j2", "src/App.tsx", "Replaced App.tsx with custom template"),
    TemplateFile(
        "webresource/src/main.tsx.j2", "src/main.tsx", "Generated custom main.tsx with providers"
    ),
]

WEBRESOURCE_SUPPORT_FILES: list[TemplateFile] = [
    PRETTIER_FILE,
    TemplateFile(
        "webresource/src/services/XrmService.ts.j2",
        "src/services/XrmService.ts",
        "Created XrmService.ts in src/services",
    ),
    TemplateFile(
        "webresource/src/hooks/useXrm.ts.j2",
        "src/hooks/useXrm.ts",
        "Created useXrm.ts in src/hooks",
    ),
]


class WebResourceCreator(KendoViteCreator):
    """React app packaged as Dynamics 365 webresources."""

    app_type: ClassVar[AppType] = AppType.WEBRESOURCE

    async def scaffold(self) -> None:
        await self.scaffold_vite()
        await self.write_templates(WEBRESOURCE_FILES)
        await self.update_page_title()
        await self.write_templates(WEBRESOURCE_SUPPORT_FILES)
