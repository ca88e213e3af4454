"""Shared pytest fixtures for KUMI tests."""

import json
from pathlib import Path

import pytest

from kumi.core.catalog import SectionCatalog, SectionDefinition, SectionTier

CATALOG = {
    "components": [
        {"id": "hero-standard", "name": "Hero", "tier": "standard"},
        {"id": "features-grid", "name": "Features Grid", "tier": "standard"},
        {"id": "pricing-base", "name": "Pricing", "tier": "premium"},
        {"id": "testimonials-base", "name": "Testimonials", "tier": "standard"},
        {"id": "faq-base", "name": "FAQ", "tier": "standard"},
        {"id": "contact-base", "name": "Contact", "tier": "standard"},
        {"id": "divider", "name": "Divider", "tier": "standard"},
    ]
}


class ScriptedPrompter:
    """Prompter that replays a fixed list of answers.

    ``confirm`` consumes the next answer too and treats "y"/"yes" as True.
    Running out of answers raises EOFError, like a closed stdin.
    """

    def __init__(self, answers: list[str]):
        self.answers = list(answers)
        self.labels: list[str] = []
        self.messages: list[str] = []
        self.warnings: list[str] = []
        self.catalog_shown = 0

    def _next(self, label: str) -> str:
        self.labels.append(label)
        if not self.answers:
            raise EOFError(label)
        return self.answers.pop(0)

    def ask(self, label: str) -> str:
        return self._next(label)

    def confirm(self, label: str) -> bool:
        return self._next(label).strip().lower() in ("y", "yes")

    def echo(self, message: str) -> None:
        self.messages.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def show_catalog(self, catalog: SectionCatalog) -> None:
        self.catalog_shown += 1


@pytest.fixture
def catalog() -> SectionCatalog:
    """Return the catalog used across tests."""
    return SectionCatalog.model_validate(CATALOG)


@pytest.fixture
def premium_section() -> SectionDefinition:
    return SectionDefinition(id="pricing-base", name="Pricing", tier=SectionTier.PREMIUM)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create a project with library/catalog.json."""
    library = tmp_path / "library"
    library.mkdir()
    (library / "catalog.json").write_text(json.dumps(CATALOG), encoding="utf-8")
    return tmp_path


@pytest.fixture
def read_json():
    """Return a helper that loads a JSON file."""

    def _read(path: Path):
        return json.loads(path.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def make_prompter():
    """Return a factory for scripted prompters."""
    return ScriptedPrompter
