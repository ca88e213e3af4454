"""Tests for section field templates and content records."""

from kumi.core.sections import SECTION_TEMPLATES, get_template


class TestTemplates:
    """Test the registered section templates."""

    def test_known_sections(self) -> None:
        assert set(SECTION_TEMPLATES) == {
            "hero-standard",
            "features-grid",
            "pricing-base",
            "testimonials-base",
            "faq-base",
            "contact-base",
        }

    def test_unknown_section_has_no_template(self) -> None:
        assert get_template("divider") is None

    def test_hero_fields(self) -> None:
        template = get_template("hero-standard")

        assert [f.key for f in template.fields] == [
            "title",
            "subtitle",
            "desc",
            "bg_img",
            "cta_text",
            "cta_link",
        ]
        assert not template.has_items

    def test_list_sections_have_items(self) -> None:
        for section_id in ("features-grid", "pricing-base", "testimonials-base", "faq-base"):
            assert get_template(section_id).has_items, section_id


class TestContentBuilders:
    """Test content records built from answers."""

    def test_hero_record(self) -> None:
        answers = {"title": "Welcome", "subtitle": "Hi"}

        assert get_template("hero-standard").build(answers, []) == {"hero": answers}

    def test_features_html(self) -> None:
        content = get_template("features-grid").build(
            {"section_title": "Services"},
            [
                {"icon": "star", "title": "Fast", "desc": "Very"},
                {"icon": "bolt", "title": "Safe", "desc": "Always"},
            ],
        )

        assert content["section_title"] == "Services"
        assert content["features_html"].splitlines() == [
            '<div class="feature"><i class="icon-star"></i><h3>Fast</h3><p>Very</p></div>',
            '<div class="feature"><i class="icon-bolt"></i><h3>Safe</h3><p>Always</p></div>',
        ]

    def test_pricing_record(self) -> None:
        content = get_template("pricing-base").build(
            {"plan_name": "Pro", "price": "9", "currency": "$", "payment_link": "https://pay"},
            [{"feature": "One"}, {"feature": "Two"}],
        )

        assert content == {
            "plan_name": "Pro",
            "price": "9",
            "currency": "$",
            "features_html": "<li>One</li>\n<li>Two</li>",
            "payment_link": "https://pay",
        }

    def test_faq_html_is_escaped(self) -> None:
        content = get_template("faq-base").build({}, [{"q": "<b>Why?</b>", "a": "A & B"}])

        assert content == {
            "faq_html": '<div class="faq-item"><strong>&lt;b&gt;Why?&lt;/b&gt;</strong>'
            "<p>A &amp; B</p></div>"
        }

    def test_testimonials_html(self) -> None:
        content = get_template("testimonials-base").build(
            {}, [{"quote": "Great", "author": "Ana", "role": "CEO", "avatar": ""}]
        )

        assert content["testimonials_html"] == (
            '<article class="testimonial"><blockquote>Great</blockquote>'
            '<p class="author">Ana — CEO</p></article>'
        )

    def test_testimonial_avatar(self) -> None:
        content = get_template("testimonials-base").build(
            {}, [{"quote": "Q", "author": "Ana", "role": "CEO", "avatar": "https://x/a.png"}]
        )

        assert '<img class="avatar" src="https://x/a.png" alt="Ana">' in content["testimonials_html"]

    def test_contact_record(self) -> None:
        answers = {"title": "Hablemos", "email": "hi@x.test", "phone": "+1"}

        assert get_template("contact-base").build(answers, []) == answers
