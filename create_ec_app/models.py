"""Pydantic v2 models for the choices a user makes when creating a project.

All values here are transient: they are read once at prompt time, validated,
and handed to exactly one creator.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9_-]+$")

PROJECT_NAME_ERROR = (
    "Project name may only include lowercase letters, numbers, underscores, and hyphens."
)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class AppType(str, Enum):
    """The application templates the CLI can generate."""
    WEBRESOURCE = "webresource"
    PORTAL = "portal"
    POWERPAGES = "powerpages"
    MOBILE = "mobile"


# ---------------------------------------------------------------------------
# Menu entries
# ---------------------------------------------------------------------------

class AppTypeChoice(BaseModel):
    """One entry of the application-type menu."""
    value: AppType
    label: str
    icon: str = ""
    description: str = ""

    @property
    def title(self) -> str:
        return f"{self.icon} {self.label}".strip()


class KendoTheme(BaseModel):
    """A Kendo UI theme package the user can pick."""
    key: str = Field(..., description="Short CLI identifier, e.g. 'fluent'")
    label: str = Field(..., description="Human-readable menu label")
    package: str = Field(..., description="npm package name")

    @property
    def short_name(self) -> str:
        """The package name without its npm scope (``kendo-theme-default``)."""
        return self.package.split("/")[-1]


APP_TYPE_CHOICES: list[AppTypeChoice] = [
    AppTypeChoice(
        value=AppType.WEBRESOURCE,
        label="Webresource App",
        icon="📱",
        description="React app for Dynamics 365 webresources with Vite, Kendo UI, and Tailwind",
    ),
    AppTypeChoice(
        value=AppType.PORTAL,
        label="Portal App",
        icon="🌐",
        description="Next.js app for customer portals with authentication and Dynamics integration",
    ),
    AppTypeChoice(
        value=AppType.POWERPAGES,
        label="Power Pages App",
        icon="⚡",
        description="React SPA for Power Pages with specialized authentication and data services",
    ),
    AppTypeChoice(
        value=AppType.MOBILE,
        label="Mobile App",
        icon="📲",
        description="React Native Expo app with NativeWind, TypeScript, and MSAL authentication",
    ),
]

KENDO_THEMES: list[KendoTheme] = [
    KendoTheme(key="default", label="Default", package="@progress/kendo-theme-default"),
    KendoTheme(key="bootstrap", label="Bootstrap (v5)", package="@progress/kendo-theme-bootstrap"),
    KendoTheme(key="material", label="Material (v3)", package="@progress/kendo-theme-material"),
    KendoTheme(key="fluent", label="Fluent", package="@progress/kendo-theme-fluent"),
    KendoTheme(key="classic", label="Classic", package="@progress/kendo-theme-classic"),
]


# ---------------------------------------------------------------------------
# Lookups & validation
# ---------------------------------------------------------------------------

def validate_project_name(name: str) -> str:
    """Return *name* unchanged if it is a valid project name.

    Raises:
        ValueError: If the name is empty or contains characters outside
            ``[a-z0-9_-]``.
    """
    if not PROJECT_NAME_PATTERN.fullmatch(name or ""):
        raise ValueError(PROJECT_NAME_ERROR)
    return name


def get_app_type_choice(app_type: AppType | str) -> AppTypeChoice:
    """Return the menu entry for *app_type*.

    Raises:
        ValueError: If the value is not a known application type.
    """
    value = AppType(app_type)
    for choice in APP_TYPE_CHOICES:
        if choice.value is value:
            return choice
    raise ValueError(f"Unknown app type: {app_type}")


def get_kendo_theme(key_or_package: str) -> KendoTheme:
    """Look a theme up by its short key or its full npm package name."""
    for theme in KENDO_THEMES:
        if key_or_package in (theme.key, theme.package):
            return theme
    raise ValueError(f"Unknown Kendo theme: {key_or_package}")


# ---------------------------------------------------------------------------
# Collected options
# ---------------------------------------------------------------------------

class ProjectOptions(BaseModel):
    """Everything the user chose for one run of the CLI."""
    name: str = Field(..., description="Project / directory name")
    app_type: AppType
    kendo_theme: Optional[KendoTheme] = Field(
        default=None, description="Kendo UI theme for Kendo-based templates"
    )

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_project_name(value)
