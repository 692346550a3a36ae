"""Tests for ResponseComposer."""

import pytest

from leadbot.composer import ResponseComposer
from leadbot.models import Answers, Prompt


class TestRender:
    def test_every_prompt_has_text(self, composer):
        for prompt in Prompt:
            assert composer.render(prompt)

    def test_override_template(self):
        composer = ResponseComposer({Prompt.WELCOME: "Hello!"})
        assert composer.render(Prompt.WELCOME) == "Hello!"
        assert composer.render(Prompt.LOCATION).startswith("📍")

    def test_catalog_texts(self, composer):
        assert composer.render_catalog_intro("₹100") == (
            "🎁 *Here are our return gifts under ₹100:*"
        )
        fallback = composer.render_catalog_fallback("₹100")
        assert fallback.startswith("🎁 *Return Gifts Under ₹100*")
        assert "options under ₹100" in fallback
        assert fallback.endswith(composer.render(Prompt.CATALOG_CLOSING))


class TestSummary:
    def test_full_summary(self, composer):
        answers = Answers(timing="4", budget="5", quantity="5", location="Mumbai")
        assert composer.render_summary(answers) == (
            "*Your Requirements:*\n"
            "• Budget: More than ₹200\n"
            "• Quantity: More than 150 pieces\n"
            "• Function Timing: After 3 weeks\n"
            "• Delivery Location: Mumbai"
        )

    def test_missing_answers(self, composer):
        summary = composer.render_summary(Answers())
        assert summary.count("Not specified") == 4

    @pytest.mark.parametrize(
        "field,code,label",
        [
            ("timing", "1", "Within 1 week"),
            ("timing", "2", "Within 2 weeks"),
            ("budget", "2", "₹51 - ₹100"),
            ("budget", "3", "₹101 - ₹150"),
            ("quantity", "1", "Less than 30 pieces"),
            ("quantity", "3", "51 - 100 pieces"),
        ],
    )
    def test_labels(self, composer, field, code, label):
        summary = composer.render_summary(Answers(**{field: code}))
        assert label in summary

    def test_unknown_code(self, composer):
        summary = composer.render_summary(Answers(budget="9"))
        assert "• Budget: Not specified" in summary
