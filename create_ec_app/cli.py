"""create-ec-app command-line entry point.

Usage::

    create-ec-app
    create-ec-app my-app
    create-ec-app my-app --template powerpages --theme fluent -o ./projects
    python -m create_ec_app my-app --skip-git
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from create_ec_app import __version__
from create_ec_app.config import CreatorConfig
from create_ec_app.creators import CommandError, CreatorError, get_creator
from create_ec_app.models import (
    APP_TYPE_CHOICES,
    KENDO_THEMES,
    AppType,
    get_app_type_choice,
    validate_project_name,
)
from create_ec_app.prompts import ask_app_type, ask_project_name
from create_ec_app.utils import (
    console,
    format_duration,
    print_banner,
    print_error,
    print_next_steps,
    print_success,
)


def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser."""
    parser = argparse.ArgumentParser(
        prog="create-ec-app",
        description="EC App Creator -- scaffold preconfigured applications for the EC ecosystem",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-ec-app\n"
            "  create-ec-app my-app --template webresource --theme fluent\n"
            "  create-ec-app my-portal -t portal -o ./projects --skip-git\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Name of the project directory (prompted for if omitted)",
    )
    parser.add_argument(
        "--template", "-t",
        choices=[choice.value.value for choice in APP_TYPE_CHOICES],
        default=None,
        help="Application type (prompted for if omitted)",
    )
    parser.add_argument(
        "--theme",
        choices=[theme.key for theme in KENDO_THEMES],
        default=None,
        help="Kendo UI theme for webresource / powerpages apps (prompted for if omitted)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )
    parser.add_argument(
        "--skip-git",
        action="store_true",
        help="Do not initialise a git repository",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Echo each command and its output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def build_config(args: argparse.Namespace) -> CreatorConfig:
    """Environment-derived config with command-line flags applied on top."""
    config = CreatorConfig.from_env()
    updates: dict[str, object] = {}
    if args.output:
        updates["output_dir"] = Path(args.output)
    if args.skip_git:
        updates["init_git"] = False
    if args.verbose:
        updates["verbose"] = True
    return config.model_copy(update=updates)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``create-ec-app`` and ``python -m create_ec_app``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    print_banner()

    try:
        config = build_config(args)

        if args.project_name:
            try:
                project_name = validate_project_name(args.project_name)
            except ValueError as exc:
                print_error(f"Error: {exc}")
                sys.exit(1)
        else:
            project_name = ask_project_name()

        app_type = AppType(args.template) if args.template else ask_app_type()
        choice = get_app_type_choice(app_type)
        creator_cls = get_creator(app_type)
        options = creator_cls.prompt_options(project_name, theme=args.theme)

        console.print(
            f"\n[green]Creating[/green] [bold]{choice.label}[/bold]: [cyan]{project_name}[/cyan]"
        )

        started = time.monotonic()
        creator = creator_cls(options, config)
        asyncio.run(creator.create())
        elapsed = time.monotonic() - started

    except KeyboardInterrupt:
        console.print()
        print_error("Aborted.")
        sys.exit(1)
    except CommandError as exc:
        print_error(str(exc))
        if exc.output:
            console.print(exc.output, style="red", markup=False, highlight=False)
        sys.exit(1)
    except CreatorError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    except Exception as exc:
        print_error(f"An error occurred: {exc}")
        sys.exit(1)

    console.print()
    print_success(f"Project created successfully in {format_duration(elapsed)}!")
    print_next_steps(creator.next_steps())


if __name__ == "__main__":
    main()
