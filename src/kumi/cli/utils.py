"""
KUMI CLI Utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform
import shutil
import sys
from pathlib import Path

import typer

from kumi.core.config import KumiSettings, load_settings
from kumi.core.errors import ConfigError

__version__ = "0.1.0"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_version() -> str:
    """Get KUMI version from package metadata."""
    try:
        from importlib.metadata import version

        return version("kumi")
    except Exception:
        return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        try:
            import kumi

            install_location = Path(kumi.__file__).parent
        except Exception:
            install_location = Path.cwd()

        node = shutil.which("node")
        git = shutil.which("git")

        typer.echo(f"KUMI version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Location:      {install_location}")
        typer.echo("")
        typer.echo("Tools:")
        typer.echo(f"  git:           {git or '✗ Not found (needed by: kumi create)'}")
        typer.echo(f"  node:          {node or '✗ Not found (needed by: validate, build)'}")

        raise typer.Exit()


def configure_logging(level: str, verbose: bool = False) -> None:
    """Send log records to stderr at the requested level."""
    resolved = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("kumi").setLevel(resolved)


def get_settings(ctx: typer.Context) -> KumiSettings:
    """Return settings resolved by the main callback, loading them if absent."""
    if isinstance(ctx.obj, KumiSettings):
        return ctx.obj
    try:
        settings = load_settings()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    ctx.obj = settings
    return settings
