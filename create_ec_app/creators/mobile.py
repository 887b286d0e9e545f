"""Mobile app creator (React Native + Expo).

Starts from ``create-expo-app``'s ``blank-typescript`` template, adds
NativeWind (Tailwind for React Native) and Microsoft identity sign-in built
on ``expo-auth-session``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from create_ec_app.creators.base import BaseCreator, TemplateFile
from create_ec_app.models import AppType

EXPO_DEPENDENCIES: list[str] = [
    "nativewind",
    "react-native-reanimated",
    "react-native-safe-area-context",
    "expo-auth-session",
    "expo-crypto",
    "expo-secure-store",
    "expo-web-browser",
]

DEV_DEPENDENCIES: list[str] = [
    "tailwindcss@^3",
    "prettier-plugin-tailwindcss",
]

MOBILE_FILES: list[TemplateFile] = [
    TemplateFile(
        "mobile/tailwind.config.js.j2", "tailwind.config.js", "Created tailwind.config.js"
    ),
    TemplateFile("mobile/global.css.j2", "global.css", "Created global.css"),
    TemplateFile(
        "mobile/babel.config.js.j2", "babel.config.js", "Created babel.config.js with NativeWind"
    ),
    TemplateFile(
        "mobile/metro.config.js.j2", "metro.config.js", "Created metro.config.js with NativeWind"
    ),
    TemplateFile(
        "mobile/nativewind-env.d.ts.j2", "nativewind-env.d.ts", "Created nativewind-env.d.ts"
    ),
    TemplateFile("mobile/App.tsx.j2", "App.tsx", "Replaced App.tsx with custom template"),
    TemplateFile(
        "mobile/src/auth/authConfig.ts.j2",
        "src/auth/authConfig.ts",
        "Created authConfig.ts in src/auth",
    ),
    TemplateFile(
        "mobile/src/auth/AuthContext.tsx.j2",
        "src/auth/AuthContext.tsx",
        "Created AuthContext.tsx in src/auth",
    ),
    TemplateFile(
        "mobile/src/components/AuthButton.tsx.j2",
        "src/components/AuthButton.tsx",
        "Created AuthButton.tsx in src/components",
    ),
    TemplateFile("mobile/.prettierrc.j2", ".prettierrc", "Added .prettierrc"),
]


class MobileCreator(BaseCreator):
    """React Native Expo app with NativeWind, TypeScript and Microsoft sign-in."""

    app_type: ClassVar[AppType] = AppType.MOBILE

    @property
    def scheme(self) -> str:
        """Deep-link scheme used for the auth redirect URI.

        URI schemes must start with a letter, so names starting with a digit
        or ``-`` get an ``app-`` prefix.
        """
        scheme = self.project_name.replace("_", "-")
        if not scheme[0].isalpha():
            scheme = f"app-{scheme}"
        return scheme

    def template_context(self) -> dict[str, Any]:
        return {**super().template_context(), "scheme": self.scheme}

    async def scaffold(self) -> None:
        await self.run_step(
            [
                self.config.npx_command,
                "create-expo-app@latest",
                self.project_name,
                "--template",
                "blank-typescript",
            ],
            "Creating Expo + React Native + TS project...",
            cwd=self.config.output_dir.resolve(),
        )

        await self.run_step(
            [self.config.npx_command, "expo", "install", *EXPO_DEPENDENCIES],
            "Installing Expo dependencies (NativeWind, auth session)...",
        )
        await self.run_step(
            [self.config.npm_command, "install", "--save-dev", *DEV_DEPENDENCIES],
            "Installing dev dependencies (Tailwind CSS)...",
        )

        def _add_scheme(app_json: dict[str, Any]) -> None:
            app_json.setdefault("expo", {})["scheme"] = self.scheme

        await self.update_json("app.json", _add_scheme, "Updated app.json with auth scheme")

        def _add_scripts(package: dict[str, Any]) -> None:
            scripts = package.setdefault("scripts", {})
            scripts["dev"] = "expo start"
            scripts["build"] = "expo export"

        await self.update_json(
            "package.json", _add_scripts, "Updated package.json with dev and build scripts"
        )
        await self.write_templates(MOBILE_FILES)
