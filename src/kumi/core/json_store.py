"""
Safe JSON persistence for project data documents.

Reads never fail: a missing document yields the default, a corrupt one is
archived next to the original as ``<name>.corrupt.<millis>`` and replaced
by the default. Writes go through a sibling temp file that is renamed over
the target, so readers only ever see a complete document.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import shutil
import time
import uuid
from pathlib import Path
from typing import Any, TypeVar

from .errors import JsonStoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

CORRUPT_MARKER = ".corrupt."
TMP_MARKER = ".tmp."


def dumps_pretty(value: Any) -> str:
    """Serialize ``value`` the way every data document is stored on disk."""
    return json.dumps(value, indent=2, ensure_ascii=False) + "\n"


def backup_path_for(path: Path) -> Path:
    """Return an unused ``<name>.corrupt.<millis>`` sibling of ``path``."""
    stamp = int(time.time() * 1000)
    candidate = path.with_name(f"{path.name}{CORRUPT_MARKER}{stamp}")
    counter = 1
    while candidate.exists():
        candidate = path.with_name(f"{path.name}{CORRUPT_MARKER}{stamp}-{counter}")
        counter += 1
    return candidate


def read_json_safe(path: Path, default: T) -> T:
    """
    Read a JSON document, falling back to ``default``.

    Args:
        path: Document to read
        default: Value returned when the document is missing or corrupt

    Returns:
        The parsed document, or a deep copy of ``default``
    """
    path = Path(path)
    if not path.exists():
        return copy.deepcopy(default)

    try:
        content = path.read_text(encoding="utf-8")
        if not content.strip():
            raise ValueError("document is empty")
        return json.loads(content)  # type: ignore[no-any-return]
    except (OSError, ValueError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.warning(f"Corrupt JSON document {path}: {e}; falling back to default")

    archive_corrupt(path, default)
    return copy.deepcopy(default)


def archive_corrupt(path: Path, default: Any) -> None:
    """Back up a corrupt document and overwrite it with ``default``."""
    try:
        backup = backup_path_for(path)
        shutil.copyfile(path, backup)
        logger.info(f"Backed up corrupt document to {backup}")
    except OSError as e:
        logger.debug(f"Could not back up {path}: {e}")

    try:
        path.write_text(dumps_pretty(default), encoding="utf-8")
    except (OSError, TypeError, ValueError) as e:
        logger.debug(f"Could not reset {path} to default: {e}")


def write_json_atomic(path: Path, value: Any) -> Path:
    """
    Write ``value`` as pretty-printed JSON, replacing ``path`` atomically.

    Args:
        path: Target document
        value: JSON-serializable value

    Returns:
        The written path

    Raises:
        JsonStoreError: If the value cannot be serialized or written
    """
    path = Path(path)
    tmp_path = path.with_name(f"{path.name}{TMP_MARKER}{uuid.uuid4().hex}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = dumps_pretty(value)
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except (OSError, TypeError, ValueError) as e:
        tmp_path.unlink(missing_ok=True)
        raise JsonStoreError(f"Failed to write JSON document: {e}", path) from e

    logger.debug(f"Wrote {path}")
    return path
