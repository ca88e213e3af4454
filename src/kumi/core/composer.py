"""
Interactive site composer (the ``kumi wizard`` core).

The composer runs three phases in order:

1. SELECT: pick sections from the catalog by id or 1-based index until
   the user enters ``done`` (or an empty line). Every accepted pick is
   appended to the layout, duplicates included.
2. COLLECT: right after each pick, ask the section's fields and persist
   ``data/sections.json`` so progress survives an interrupted session.
3. FINALIZE: ask the global site config, then overwrite
   ``data/config.json`` and ``data/layout.json``.

All input and output goes through a ``Prompter`` so the state machine can
be driven by the terminal or by a scripted sequence of answers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from .catalog import SectionCatalog, SectionDefinition
from .project_data import ProjectData
from .sections import Answers, FieldPrompt, SectionTemplate, get_template

logger = logging.getLogger(__name__)

DONE_TOKEN = "done"


class Prompter(Protocol):
    """Input/output seam used by the composer."""

    def ask(self, label: str) -> str: ...

    def confirm(self, label: str) -> bool: ...

    def echo(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def show_catalog(self, catalog: SectionCatalog) -> None: ...


@dataclass
class CompositionResult:
    """What a finished wizard run wrote to disk."""

    layout: list[str] = field(default_factory=list)
    sections: dict[str, Any] = field(default_factory=dict)
    config: dict[str, Any] = field(default_factory=dict)


class Composer:
    """Three-phase wizard: selection, per-section collection, finalization."""

    def __init__(self, catalog: SectionCatalog, data: ProjectData, prompter: Prompter):
        self.catalog = catalog
        self.data = data
        self.prompter = prompter
        self.result = CompositionResult()

    def run(self) -> CompositionResult:
        """Run all phases and return what was written."""
        self.select_sections()
        self.finalize()
        return self.result

    # -------------------------------------------------------------------------
    # Phase 1: selection
    # -------------------------------------------------------------------------

    def select_sections(self) -> list[str]:
        """Loop over section picks until the user is done."""
        while True:
            self.prompter.show_catalog(self.catalog)
            choice = self.prompter.ask(f'Section id or number to add (or "{DONE_TOKEN}")')
            if self.is_done(choice):
                break

            section = self.catalog.resolve(choice)
            if section is None:
                self.prompter.echo(f"Unrecognized section '{choice.strip()}'. Try again.")
                continue

            self.add_section(section)

        logger.info(f"Selected sections: {self.result.layout}")
        return self.result.layout

    @staticmethod
    def is_done(choice: str) -> bool:
        return choice.strip().lower() in ("", DONE_TOKEN)

    def add_section(self, section: SectionDefinition) -> None:
        """Accept a pick: warn about premium, record it, collect its content."""
        if section.is_premium:
            self.prompter.warn(
                f"'{section.display_name}' is a Premium section. An active license is "
                "required for the final build (continuing for testing)."
            )
        self.result.layout.append(section.id)
        self.collect_section(section)

    # -------------------------------------------------------------------------
    # Phase 2: per-section fields
    # -------------------------------------------------------------------------

    def collect_section(self, section: SectionDefinition) -> dict[str, Any] | None:
        """
        Ask the fields of ``section`` and persist them.

        Returns:
            The stored content record, or None if the section has no template
        """
        template = get_template(section.id)
        if template is None:
            logger.debug(f"No field template for '{section.id}', layout only")
            return None

        self.prompter.echo(f"\n{section.display_name}")

        answers = self._ask_fields(template.fields)
        items = self._ask_items(template) if template.has_items else []
        answers.update(self._ask_fields(template.trailing_fields))

        content = template.build(answers, items)
        self.result.sections = self.data.save_section(section.id, content)
        return content

    def _ask_fields(self, prompts: tuple[FieldPrompt, ...]) -> Answers:
        return {prompt.key: self.prompter.ask(prompt.label) for prompt in prompts}

    def _ask_items(self, template: SectionTemplate) -> list[Answers]:
        items = []
        while True:
            items.append(self._ask_fields(template.item_fields))
            if not self.prompter.confirm(f"Add another {template.item_noun}?"):
                break
        return items

    # -------------------------------------------------------------------------
    # Phase 3: site config and layout
    # -------------------------------------------------------------------------

    def finalize(self) -> CompositionResult:
        """Ask the global site config and write config and layout."""
        self.prompter.echo("")
        title = self.prompter.ask("Site name (site.title)")
        description = self.prompter.ask("Short site description (site.description)")
        contact_email = self.prompter.ask("Global contact email")

        self.result.config = self.data.save_config(title, description, contact_email)
        self.data.save_layout(self.result.layout)
        if not self.result.sections:
            self.result.sections = self.data.load_sections()

        return self.result
