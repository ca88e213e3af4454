"""
Dispatchers for the template's own Node scripts.

The validate, build and assemble steps live in the site template as Node
scripts; KUMI runs them as blocking child processes with inherited
stdout/stderr and only reports their exit status.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ScriptError

logger = logging.getLogger(__name__)

VALIDATE_SCRIPT = Path("scripts") / "validate-data.js"
BUILD_SCRIPT = Path("scripts") / "build-standalone.js"
ASSEMBLE_SCRIPT = Path("scripts") / "assemble-theme.js"

THEMES_DIR = "themes"
STANDALONE_FILE = "index-standalone.html"
ASSETS_DIR = "assets"


@dataclass
class ScriptResult:
    """Outcome of one script invocation."""

    script: Path
    returncode: int
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and self.error is None


def run_node_script(project_root: Path, script: Path, node_bin: str = "node") -> ScriptResult:
    """
    Run ``node <script>`` in ``project_root`` and wait for it.

    Failures are logged and returned, never raised.
    """
    logger.info(f"Running {node_bin} {script} in {project_root}")
    try:
        completed = subprocess.run([node_bin, str(script)], cwd=project_root, check=False)
    except OSError as e:
        logger.error(f"Could not start {node_bin} {script}: {e}")
        return ScriptResult(script=script, returncode=-1, error=str(e))

    if completed.returncode != 0:
        logger.error(f"{script} exited with status {completed.returncode}")
    return ScriptResult(script=script, returncode=completed.returncode)


def validate_data(project_root: Path, node_bin: str = "node") -> ScriptResult:
    """
    Run the template's data validation script.

    Raises:
        ScriptError: If the project has no validation script
    """
    if not (project_root / VALIDATE_SCRIPT).is_file():
        raise ScriptError("No validation script found in the current project", VALIDATE_SCRIPT)
    return run_node_script(project_root, VALIDATE_SCRIPT, node_bin)


def build_standalone(project_root: Path, node_bin: str = "node") -> ScriptResult:
    """Run the template's standalone HTML build script."""
    return run_node_script(project_root, BUILD_SCRIPT, node_bin)


def assemble_theme(project_root: Path, node_bin: str = "node") -> ScriptResult:
    """Run the template's theme assembler."""
    return run_node_script(project_root, ASSEMBLE_SCRIPT, node_bin)


@dataclass
class CleanResult:
    """Paths removed by ``clean_themes``, and the ones that could not be."""

    files: list[Path] = field(default_factory=list)
    directories: list[Path] = field(default_factory=list)
    errors: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.files) + len(self.directories)


def _remove_path(path: Path, removed: list[Path], errors: list[tuple[Path, str]]) -> None:
    # Symlinks are unlinked, never followed into their target
    try:
        if path.is_symlink() or not path.is_dir():
            path.unlink()
        else:
            shutil.rmtree(path)
    except OSError as e:
        logger.error(f"Could not remove {path}: {e}")
        errors.append((path, str(e)))
        return
    removed.append(path)


def clean_themes(project_root: Path) -> CleanResult | None:
    """
    Remove generated build output from every theme.

    Deletes ``themes/*/index-standalone.html`` and ``themes/*/assets/``.
    A path that cannot be removed is recorded in ``errors`` and the
    remaining paths are still processed.

    Returns:
        What was removed, or None if the project has no themes/ directory
    """
    themes_dir = project_root / THEMES_DIR
    if not themes_dir.is_dir():
        return None

    result = CleanResult()
    for standalone in sorted(themes_dir.glob(f"*/{STANDALONE_FILE}")):
        if standalone.is_symlink() or standalone.is_file():
            _remove_path(standalone, result.files, result.errors)

    for assets in sorted(themes_dir.glob(f"*/{ASSETS_DIR}")):
        if assets.is_symlink() or assets.is_dir():
            _remove_path(assets, result.directories, result.errors)

    logger.info(f"Removed {result.total} generated paths under {themes_dir}")
    return result
