"""
Field templates for the sections the wizard knows how to fill in.

Each template describes the prompts for one section id:

- ``fields``: asked once, before any list items
- ``item_fields``: asked repeatedly until the user declines another item
- ``trailing_fields``: asked once, after the list items

and how the collected answers become the content record stored in
``data/sections.json``. List items are rendered into small HTML fragments
that the site template injects as-is.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from html import escape
from typing import Any

Answers = dict[str, str]
ContentBuilder = Callable[[Answers, list[Answers]], dict[str, Any]]


@dataclass(frozen=True)
class FieldPrompt:
    """A single question: the record key and the label shown to the user."""

    key: str
    label: str


@dataclass(frozen=True)
class SectionTemplate:
    """Prompt layout and content builder for one section id."""

    section_id: str
    build: ContentBuilder
    fields: tuple[FieldPrompt, ...] = ()
    item_fields: tuple[FieldPrompt, ...] = ()
    trailing_fields: tuple[FieldPrompt, ...] = ()
    item_noun: str = "item"

    @property
    def has_items(self) -> bool:
        return bool(self.item_fields)


# =============================================================================
# Content builders
# =============================================================================


def _build_hero(answers: Answers, items: list[Answers]) -> dict[str, Any]:
    return {"hero": dict(answers)}


def _build_features(answers: Answers, items: list[Answers]) -> dict[str, Any]:
    features_html = "\n".join(
        f'<div class="feature"><i class="icon-{escape(item["icon"])}"></i>'
        f"<h3>{escape(item['title'])}</h3><p>{escape(item['desc'])}</p></div>"
        for item in items
    )
    return {"section_title": answers["section_title"], "features_html": features_html}


def _build_pricing(answers: Answers, items: list[Answers]) -> dict[str, Any]:
    features_html = "\n".join(f"<li>{escape(item['feature'])}</li>" for item in items)
    return {
        "plan_name": answers["plan_name"],
        "price": answers["price"],
        "currency": answers["currency"],
        "features_html": features_html,
        "payment_link": answers["payment_link"],
    }


def _render_testimonial(item: Answers) -> str:
    avatar = ""
    if item.get("avatar"):
        avatar = (
            f'<img class="avatar" src="{escape(item["avatar"])}" '
            f'alt="{escape(item["author"])}">'
        )
    return (
        f'<article class="testimonial">{avatar}<blockquote>{escape(item["quote"])}</blockquote>'
        f'<p class="author">{escape(item["author"])} — {escape(item["role"])}</p></article>'
    )


def _build_testimonials(answers: Answers, items: list[Answers]) -> dict[str, Any]:
    return {"testimonials_html": "\n".join(_render_testimonial(item) for item in items)}


def _build_faq(answers: Answers, items: list[Answers]) -> dict[str, Any]:
    faq_html = "\n".join(
        f'<div class="faq-item"><strong>{escape(item["q"])}</strong><p>{escape(item["a"])}</p></div>'
        for item in items
    )
    return {"faq_html": faq_html}


def _build_contact(answers: Answers, items: list[Answers]) -> dict[str, Any]:
    return dict(answers)


# =============================================================================
# Registry
# =============================================================================


SECTION_TEMPLATES: dict[str, SectionTemplate] = {
    template.section_id: template
    for template in (
        SectionTemplate(
            section_id="hero-standard",
            build=_build_hero,
            fields=(
                FieldPrompt("title", "H1 title"),
                FieldPrompt("subtitle", "Small subtitle"),
                FieldPrompt("desc", "Description"),
                FieldPrompt("bg_img", "Background image URL"),
                FieldPrompt("cta_text", "CTA text"),
                FieldPrompt("cta_link", "CTA link"),
            ),
        ),
        SectionTemplate(
            section_id="features-grid",
            build=_build_features,
            fields=(FieldPrompt("section_title", "Section title (e.g. Our Services)"),),
            item_fields=(
                FieldPrompt("icon", "Icon (e.g. star)"),
                FieldPrompt("title", "Feature title"),
                FieldPrompt("desc", "Short description"),
            ),
            item_noun="feature",
        ),
        SectionTemplate(
            section_id="pricing-base",
            build=_build_pricing,
            fields=(
                FieldPrompt("plan_name", "Plan name (e.g. Pro)"),
                FieldPrompt("price", "Price (number)"),
                FieldPrompt("currency", "Currency (e.g. $)"),
            ),
            item_fields=(FieldPrompt("feature", "Feature description"),),
            trailing_fields=(FieldPrompt("payment_link", "Payment link (URL)"),),
            item_noun="feature",
        ),
        SectionTemplate(
            section_id="testimonials-base",
            build=_build_testimonials,
            item_fields=(
                FieldPrompt("quote", "Testimonial quote"),
                FieldPrompt("author", "Author name"),
                FieldPrompt("role", "Role / company"),
                FieldPrompt("avatar", "Avatar URL"),
            ),
            item_noun="testimonial",
        ),
        SectionTemplate(
            section_id="faq-base",
            build=_build_faq,
            item_fields=(
                FieldPrompt("q", "Question"),
                FieldPrompt("a", "Answer"),
            ),
            item_noun="question",
        ),
        SectionTemplate(
            section_id="contact-base",
            build=_build_contact,
            fields=(
                FieldPrompt("title", "Contact title (e.g. Let's talk)"),
                FieldPrompt("email", "Destination email"),
                FieldPrompt("phone", "Phone / WhatsApp"),
            ),
        ),
    )
}


def get_template(section_id: str) -> SectionTemplate | None:
    """Return the field template for ``section_id``, if the wizard has one."""
    return SECTION_TEMPLATES.get(section_id)
