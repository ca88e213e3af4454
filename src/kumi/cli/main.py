"""
KUMI CLI main application.

Registers the top-level commands implemented in the kumi.cli modules.
"""

import sys

import typer

from kumi.cli.project import build_command, clean_themes_command, create_command, validate_command
from kumi.cli.utils import configure_logging, version_callback
from kumi.cli.wizard import wizard_command
from kumi.core.config import load_settings
from kumi.core.errors import ConfigError

app = typer.Typer(
    help="""KUMI CLI - Deployment tool for KUMI

Command Types:
  • Project Creation: create
    → Clone the site template into a new folder

  • Project Operations: wizard, validate, build, clean-themes
    → Operate in the CURRENT directory (a KUMI project)
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """KUMI CLI main callback for global options."""
    try:
        settings = load_settings()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    configure_logging(settings.log_level, verbose)
    ctx.obj = settings


app.command(name="create")(create_command)
app.command(name="validate")(validate_command)
app.command(name="build")(build_command)
app.command(name="wizard")(wizard_command)
app.command(name="clean-themes")(clean_themes_command)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI."""
    app(args=argv if argv is not None else sys.argv[1:], prog_name="kumi")
