"""
Section catalog for KUMI projects.

The catalog is a static JSON registry shipped with the site template:

    { "components": [ { "id": "hero-standard", "name": "Hero", "tier": "standard" }, ... ] }

It is looked up at ``library/catalog.json`` first, then ``catalog.json``.
"""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import CatalogError

CATALOG_LOCATIONS = (Path("library") / "catalog.json", Path("catalog.json"))


class SectionTier(StrEnum):
    """License tier of a section."""

    STANDARD = "standard"
    PREMIUM = "premium"


class SectionDefinition(BaseModel):
    """A single entry of the section catalog."""

    id: str = Field(..., min_length=1, description="Unique section identifier")
    name: str = Field(default="", description="Display name")
    tier: SectionTier = Field(default=SectionTier.STANDARD)

    model_config = ConfigDict(frozen=True)

    @property
    def is_premium(self) -> bool:
        return self.tier == SectionTier.PREMIUM

    @property
    def display_name(self) -> str:
        return self.name or self.id


class SectionCatalog(BaseModel):
    """Ordered list of available sections."""

    components: list[SectionDefinition] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.components)

    def get(self, section_id: str) -> SectionDefinition | None:
        """Return the first section with ``section_id``, if any."""
        for component in self.components:
            if component.id == section_id:
                return component
        return None

    def resolve(self, choice: str) -> SectionDefinition | None:
        """
        Resolve user input to a section.

        Accepts a section id or a 1-based display index. Ids take priority,
        so a catalog id that looks like a number still selects by id.
        """
        choice = choice.strip()
        if not choice:
            return None

        section = self.get(choice)
        if section is not None:
            return section

        if choice.isascii() and choice.isdigit():
            index = int(choice) - 1
            if 0 <= index < len(self.components):
                return self.components[index]

        return None


def find_catalog(project_root: Path) -> Path | None:
    """Return the first existing catalog file under ``project_root``."""
    for location in CATALOG_LOCATIONS:
        candidate = project_root / location
        if candidate.is_file():
            return candidate
    return None


def load_catalog(project_root: Path) -> SectionCatalog:
    """
    Load the section catalog of a project.

    Args:
        project_root: Root directory of the KUMI project

    Returns:
        Parsed catalog

    Raises:
        CatalogError: If no catalog exists or it cannot be parsed
    """
    catalog_path = find_catalog(project_root)
    if catalog_path is None:
        raise CatalogError(
            "No library/catalog.json or catalog.json found in the project",
            project_root,
        )

    try:
        data = json.loads(catalog_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise CatalogError(f"Could not read catalog: {e}", catalog_path) from e

    if not isinstance(data, dict):
        raise CatalogError("Catalog must be a JSON object with a 'components' list", catalog_path)

    try:
        return SectionCatalog.model_validate({"components": data.get("components") or []})
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog entry: {e}", catalog_path) from e
