"""
Error types for the KUMI CLI.
"""

from pathlib import Path


class KumiError(Exception):
    """Base exception for all KUMI errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending path if available."""
        if self.path is not None:
            return f"{self.message} ({self.path})"
        return self.message


class ConfigError(KumiError):
    """Raised when kumi.toml cannot be parsed."""

    pass


class CatalogError(KumiError):
    """
    Raised when the section catalog cannot be loaded.

    Examples:
    - Neither library/catalog.json nor catalog.json exists
    - Catalog file is not valid JSON
    - A component entry has no id or an unknown tier
    """

    pass


class JsonStoreError(KumiError):
    """Raised when a JSON document cannot be written."""

    pass


class ProjectLockedError(KumiError):
    """Raised when another wizard already owns the project's data directory."""

    pass


class BootstrapError(KumiError):
    """Base class for project creation failures."""

    pass


class TargetExistsError(BootstrapError):
    """Raised when the directory for a new project already exists."""

    pass


class CloneError(BootstrapError):
    """Raised when the template repository cannot be cloned."""

    pass


class ScriptError(KumiError):
    """Raised when an external project script is missing."""

    pass
