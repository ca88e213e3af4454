"""
Project creation: clone the site template into a fresh directory.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from .config import DEFAULT_TEMPLATE_REPO
from .errors import CloneError, TargetExistsError

logger = logging.getLogger(__name__)


def create_project(
    name: str,
    parent_dir: Path,
    repo_url: str = DEFAULT_TEMPLATE_REPO,
    git_bin: str = "git",
) -> Path:
    """
    Clone the template repository into ``parent_dir / name``.

    The template's ``.git`` directory is removed afterwards so the new
    project starts without inherited history.

    Args:
        name: Project directory name
        parent_dir: Directory to create the project in
        repo_url: Template repository to clone
        git_bin: git executable

    Returns:
        Path to the new project

    Raises:
        TargetExistsError: If the target directory already exists
        CloneError: If git is missing or the clone fails
    """
    target = Path(parent_dir) / name
    if target.exists():
        raise TargetExistsError(f"Folder '{name}' already exists", target)

    logger.info(f"Cloning {repo_url} into {target}")
    try:
        completed = subprocess.run([git_bin, "clone", repo_url, str(target)], check=False)
    except FileNotFoundError as e:
        raise CloneError(f"git executable not found: {git_bin}") from e

    if completed.returncode != 0:
        raise CloneError(
            f"Could not clone the template repository (git exited with {completed.returncode})",
            target,
        )

    _strip_git_history(target)
    return target


def _strip_git_history(target: Path) -> None:
    git_dir = target / ".git"
    if git_dir.exists():
        shutil.rmtree(git_dir)
        logger.debug(f"Removed {git_dir}")
