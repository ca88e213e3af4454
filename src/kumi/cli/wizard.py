"""
Wizard command for the KUMI CLI.

Interactive site composition: choose sections from the catalog, fill in
their content, set the global site config and optionally assemble the
theme right away.
"""

from __future__ import annotations

from pathlib import Path

import typer

from kumi.cli.utils import get_settings
from kumi.cli_ui import (
    TerminalPrompter,
    confirm,
    print_error,
    print_header,
    print_info,
    print_success,
)
from kumi.core.catalog import load_catalog
from kumi.core.composer import Composer
from kumi.core.errors import CatalogError, JsonStoreError, ProjectLockedError
from kumi.core.project_data import ProjectData
from kumi.core.scripts import ASSEMBLE_SCRIPT, assemble_theme


def wizard_command(ctx: typer.Context) -> None:
    """Interactive wizard to compose a site by selecting sections."""
    settings = get_settings(ctx)
    project_root = Path.cwd()

    try:
        catalog = load_catalog(project_root)
    except CatalogError as e:
        print_error(e.message)
        return

    print_header("KUMI Wizard", "Guided site composition")

    try:
        with ProjectData(project_root) as data:
            result = Composer(catalog, data, TerminalPrompter()).run()
    except ProjectLockedError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except JsonStoreError as e:
        print_error(str(e))
        return
    except (EOFError, KeyboardInterrupt):
        typer.echo("")
        print_error("Wizard cancelled.")
        raise typer.Abort()

    print_success(
        f"Saved {len(result.layout)} section(s) to data/layout.json, "
        "data/sections.json and data/config.json"
    )

    if confirm("Build the site now?"):
        print_info("Launching build...")
        build = assemble_theme(project_root, settings.node_bin)
        if not build.ok:
            print_error(f"Error running the theme assembler (exit status {build.returncode})")
    else:
        print_info(
            f"Wizard finished. Run `{settings.node_bin} {ASSEMBLE_SCRIPT.as_posix()}` "
            "when you want to generate the site."
        )
