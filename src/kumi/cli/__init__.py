"""
KUMI CLI Package.

- main.py: Typer application and command registration
- project.py: create, validate, build, clean-themes
- wizard.py: Interactive site composition
- utils.py: Shared utilities
"""

from kumi.cli.main import app, main
from kumi.cli.utils import __version__, get_version, version_callback

__all__ = [
    "__version__",
    "app",
    "main",
    "get_version",
    "version_callback",
]
