"""
KUMI - scaffolding CLI for the KUMI static-site template.

Clones the template, composes a site through an interactive wizard and
drives the template's own build scripts.
"""

from __future__ import annotations

from importlib.metadata import version as _metadata_version

from .core.errors import (
    BootstrapError,
    CatalogError,
    CloneError,
    KumiError,
    TargetExistsError,
)
from .core.json_store import read_json_safe, write_json_atomic


def _get_version() -> str:
    """Get version from installed metadata."""
    try:
        return _metadata_version("kumi")
    except Exception:
        return "0.1.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "KumiError",
    "CatalogError",
    "BootstrapError",
    "TargetExistsError",
    "CloneError",
    "read_json_safe",
    "write_json_atomic",
]
