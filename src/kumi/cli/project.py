"""
Project commands for the KUMI CLI.

- create: Clone the site template into a new directory
- validate: Run the template's data validation script
- build: Run the template's standalone build script
- clean-themes: Remove generated theme builds
"""

from __future__ import annotations

from pathlib import Path

import typer

from kumi.cli.utils import get_settings
from kumi.cli_ui import console, print_error, print_info, print_success
from kumi.core.bootstrap import create_project
from kumi.core.errors import BootstrapError, ScriptError
from kumi.core.scripts import build_standalone, clean_themes, validate_data


def create_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the new project directory"),
) -> None:
    """
    Create a new project by cloning the base template repository.

    The template's git history is removed so the project starts clean.
    """
    settings = get_settings(ctx)
    target = Path.cwd() / name

    console.print(f"KUMI: creating new project in {target}...", markup=False)
    try:
        create_project(name, Path.cwd(), settings.template_repo, settings.git_bin)
    except BootstrapError as e:
        print_error(f"Error: {e.message}")
        raise typer.Exit(code=1)

    typer.echo("")
    print_success(f"Project '{name}' created!")
    typer.echo("\nNext steps:")
    typer.echo(f"  1. cd {name}")
    typer.echo("  2. npm install")
    typer.echo("  3. npm run dev")


def validate_command(ctx: typer.Context) -> None:
    """Validate that the JSON files in data/ match the template schemas."""
    settings = get_settings(ctx)
    try:
        result = validate_data(Path.cwd(), settings.node_bin)
    except ScriptError as e:
        print_error(f"Error: {e.message}")
        return

    if not result.ok:
        print_error(f"Validation script failed (exit status {result.returncode})")


def build_command(ctx: typer.Context) -> None:
    """Generate the static single-file HTML build with everything inlined."""
    settings = get_settings(ctx)
    print_info("Generating static build...")
    result = build_standalone(Path.cwd(), settings.node_bin)
    if not result.ok:
        print_error(f"Build script failed (exit status {result.returncode})")


def clean_themes_command() -> None:
    """Remove generated builds in themes/* (index-standalone.html and assets/)."""
    result = clean_themes(Path.cwd())
    if result is None:
        typer.echo("No themes/ folder found. Nothing to clean.")
        return

    print_success(
        f"Themes cleaned: removed {len(result.files)} index-standalone.html file(s) "
        f"and {len(result.directories)} assets/ folder(s)."
    )
    for path, reason in result.errors:
        print_error(f"Could not remove {path}: {reason}")
