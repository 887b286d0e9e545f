"""Power Pages single-page app creator.

Generates a Vite + React SPA meant to be uploaded to a Power Pages site:
portal-user authentication via the ``Microsoft.Dynamic365.Portal`` object,
a Web API data service and the ``powerpages.config.json`` deployment file.
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

# Written before the index.html title is patched.
POWERPAGES_FILES: list[TemplateFile] = [
    *TAILWIND_FILES,
    TemplateFile(
        "powerpages/vite.config.ts.j2",
        "vite.config.ts",
        "Replaced vite.config.ts with custom build config",
    ),
    *CSS_FILES,
    TemplateFile(
        "powerpages/src/components/shared/AuthButton.tsx.j2",
        "src/components/shared/AuthButton.tsx",
        "Created AuthButton.tsx in src/components/shared",
    ),
    TemplateFile("powerpages/src/App.tsx.j2", "src/App.tsx", "Replaced App.tsx with custom template"),
    TemplateFile(
        "powerpages/src/main.tsx.j2", "src/main.tsx", "Generated custom main.tsx with providers"
    ),
]

# Written after it.
POWERPAGES_SUPPORT_FILES: list[TemplateFile] = [
    PRETTIER_FILE,
    TemplateFile(
        "powerpages/src/context/AuthContext.tsx.j2",
        "src/context/AuthContext.tsx",
        "Created AuthContext.tsx in src/context",
    ),
    TemplateFile(
        "powerpages/src/services/DataService.ts.j2",
        "src/services/DataService.ts",
        "Created DataService.ts in src/services",
    ),
    TemplateFile(
        "powerpages/powerpages.config.json.j2",
        "powerpages.config.json",
        "Created powerpages.config.json",
    ),
]


class PowerPagesCreator(KendoViteCreator):
    """React SPA for Power Pages with portal authentication and data services."""

    app_type: ClassVar[AppType] = AppType.POWERPAGES

    async def scaffold(self) -> None:
        await self.scaffold_vite()
        await self.write_templates(POWERPAGES_FILES)
        await self.update_page_title()
        await self.write_templates(POWERPAGES_SUPPORT_FILES)
