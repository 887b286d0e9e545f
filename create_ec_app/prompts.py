"""Interactive questions asked on the terminal.

Each function blocks on ``rich.prompt`` and returns an already validated
value, re-asking until the answer is acceptable.
"""

from __future__ import annotations

from rich.prompt import Prompt
from rich.table import Table

from create_ec_app.models import (
    APP_TYPE_CHOICES,
    KENDO_THEMES,
    AppType,
    KendoTheme,
    get_kendo_theme,
    validate_project_name,
)
from create_ec_app.utils import console, print_error


def ask_project_name() -> str:
    """Ask for the project name until it matches the allowed character set."""
    while True:
        answer = Prompt.ask("What is the name of your project?", console=console).strip()
        try:
            return validate_project_name(answer)
        except ValueError as exc:
            print_error(str(exc))


def ask_app_type() -> AppType:
    """Show the application-type menu and return the selected type."""
    table = Table(title="Application types", show_header=True, header_style="bold cyan")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Description", style="dim")
    for choice in APP_TYPE_CHOICES:
        table.add_row(choice.value.value, choice.title, choice.description)

    console.print(table)
    answer = Prompt.ask(
        "What type of application would you like to create?",
        choices=[choice.value.value for choice in APP_TYPE_CHOICES],
        default=APP_TYPE_CHOICES[0].value.value,
        console=console,
    )
    return AppType(answer)


def ask_kendo_theme() -> KendoTheme:
    """Ask which Kendo UI theme package to install."""
    for theme in KENDO_THEMES:
        console.print(f"  [cyan]{theme.key:<10}[/cyan] {theme.label} [dim]({theme.package})[/dim]")
    answer = Prompt.ask(
        "Which Kendo UI theme would you like to install?",
        choices=[theme.key for theme in KENDO_THEMES],
        default=KENDO_THEMES[0].key,
        console=console,
    )
    return get_kendo_theme(answer)
