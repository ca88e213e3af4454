"""
Owner of a project's data documents.

All wizard writes to ``data/sections.json``, ``data/config.json`` and
``data/layout.json`` go through a ``ProjectData`` instance. While open it
holds ``data/.kumi.lock`` so a second wizard on the same project fails
fast instead of racing on the read-modify-write of ``sections.json``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from .errors import ProjectLockedError
from .json_store import archive_corrupt, read_json_safe, write_json_atomic

logger = logging.getLogger(__name__)

DATA_DIR = "data"
SECTIONS_FILE = "sections.json"
CONFIG_FILE = "config.json"
LAYOUT_FILE = "layout.json"
LOCK_FILE = ".kumi.lock"


def _pid_alive(pid: int) -> bool:
    """Check whether a process with ``pid`` is still running."""
    if pid <= 0:
        return False
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        # Exists but belongs to someone else
        return True
    except OSError:
        return False
    return True


class ProjectData:
    """
    Single-writer access to the ``data/`` documents of a project.

    Use as a context manager:

        with ProjectData(project_root) as data:
            data.save_section("hero-standard", {...})
    """

    def __init__(self, project_root: Path):
        self.project_root = Path(project_root)
        self.data_dir = self.project_root / DATA_DIR
        self._locked = False

    @property
    def sections_path(self) -> Path:
        return self.data_dir / SECTIONS_FILE

    @property
    def config_path(self) -> Path:
        return self.data_dir / CONFIG_FILE

    @property
    def layout_path(self) -> Path:
        return self.data_dir / LAYOUT_FILE

    @property
    def lock_path(self) -> Path:
        return self.data_dir / LOCK_FILE

    # -------------------------------------------------------------------------
    # Locking
    # -------------------------------------------------------------------------

    def acquire(self) -> None:
        """
        Take ownership of the data directory.

        Raises:
            ProjectLockedError: If a running process already holds the lock
        """
        if self._locked:
            return

        self.data_dir.mkdir(parents=True, exist_ok=True)

        for _ in range(2):
            try:
                fd = os.open(self.lock_path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o644)
            except FileExistsError:
                owner = self._lock_owner()
                if owner is not None and _pid_alive(owner):
                    raise ProjectLockedError(
                        f"Another wizard (pid {owner}) is editing this project", self.lock_path
                    ) from None
                logger.info(f"Removing stale lock {self.lock_path} (pid {owner})")
                self.lock_path.unlink(missing_ok=True)
                continue

            with os.fdopen(fd, "w") as f:
                f.write(str(os.getpid()))
            self._locked = True
            logger.debug(f"Acquired {self.lock_path}")
            return

        raise ProjectLockedError("Could not acquire project lock", self.lock_path)

    def release(self) -> None:
        """Give up ownership of the data directory."""
        if not self._locked:
            return
        self._locked = False
        try:
            self.lock_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove lock {self.lock_path}: {e}")

    def _lock_owner(self) -> int | None:
        try:
            return int(self.lock_path.read_text(encoding="utf-8").strip())
        except (OSError, ValueError):
            return None

    def __enter__(self) -> ProjectData:
        self.acquire()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()

    # -------------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------------

    def load_sections(self) -> dict[str, Any]:
        """Return the section content map (empty if missing, corrupt or not an object)."""
        sections = read_json_safe(self.sections_path, {})
        if not isinstance(sections, dict):
            logger.warning(f"{self.sections_path} is not an object; starting from empty")
            archive_corrupt(self.sections_path, {})
            return {}
        return sections

    def save_section(self, section_id: str, content: dict[str, Any]) -> dict[str, Any]:
        """
        Set one section's content and persist the whole map.

        Returns:
            The section content map as written
        """
        sections = self.load_sections()
        sections[section_id] = content
        write_json_atomic(self.sections_path, sections)
        logger.info(f"Saved section '{section_id}' to {self.sections_path}")
        return sections

    def save_config(self, title: str, description: str, contact_email: str) -> dict[str, Any]:
        """Overwrite the site config document."""
        config = {
            "site": {
                "title": title,
                "description": description,
                "contact_email": contact_email,
            }
        }
        write_json_atomic(self.config_path, config)
        return config

    def save_layout(self, section_ids: list[str]) -> dict[str, Any]:
        """Overwrite the layout document with ``section_ids`` in order."""
        layout = {"sections": list(section_ids)}
        write_json_atomic(self.layout_path, layout)
        return layout
