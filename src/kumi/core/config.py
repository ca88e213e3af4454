"""
Runtime settings for the KUMI CLI.

Resolution order (later wins):

1. Built-in defaults
2. ``[kumi]`` table of ``kumi.toml`` in the working directory
3. ``KUMI_*`` environment variables
"""

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path

from .errors import ConfigError

DEFAULT_TEMPLATE_REPO = "https://github.com/sosaheri/kumi-cms.git"
CONFIG_FILE = "kumi.toml"

ENV_VARS = {
    "template_repo": "KUMI_TEMPLATE_REPO",
    "node_bin": "KUMI_NODE",
    "git_bin": "KUMI_GIT",
    "log_level": "KUMI_LOG_LEVEL",
}


@dataclass
class KumiSettings:
    """Resolved CLI settings."""

    template_repo: str = DEFAULT_TEMPLATE_REPO
    node_bin: str = "node"
    git_bin: str = "git"
    log_level: str = "WARNING"


def load_settings(cwd: Path | None = None, environ: dict[str, str] | None = None) -> KumiSettings:
    """
    Resolve settings for a CLI invocation.

    Args:
        cwd: Directory to look for kumi.toml in (defaults to current directory)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Resolved settings

    Raises:
        ConfigError: If kumi.toml exists but is not valid TOML
    """
    cwd = cwd or Path.cwd()
    environ = dict(os.environ) if environ is None else environ
    settings = KumiSettings()
    known = {f.name for f in fields(KumiSettings)}

    config_path = cwd / CONFIG_FILE
    if config_path.is_file():
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Invalid {CONFIG_FILE}: {e}", config_path) from e

        for key, value in data.get("kumi", {}).items():
            if key in known and isinstance(value, str):
                setattr(settings, key, value)

    for key, env_var in ENV_VARS.items():
        value = environ.get(env_var)
        if value:
            setattr(settings, key, value)

    settings.log_level = settings.log_level.upper()
    return settings
