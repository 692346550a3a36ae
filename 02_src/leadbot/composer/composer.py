"""ResponseComposer implementation."""

from ..models import Answers, Prompt
from .templates import (
    BUDGET_LABELS,
    CATALOG_FALLBACK,
    CATALOG_INTRO,
    NOT_SPECIFIED,
    QUANTITY_LABELS,
    TEMPLATES,
    TIMING_LABELS,
)


def _label(table: dict[str, str], code: str | None) -> str:
    if code is None:
        return NOT_SPECIFIED
    return table.get(code, NOT_SPECIFIED)


class ResponseComposer:
    """Renders outgoing texts. Pure functions of their arguments."""

    def __init__(self, templates: dict[Prompt, str] | None = None):
        self._templates = dict(TEMPLATES)
        if templates:
            self._templates.update(templates)

    def render(self, prompt: Prompt) -> str:
        return self._templates[prompt]

    def render_summary(self, answers: Answers) -> str:
        """Summarize collected answers with their display labels."""
        return (
            "*Your Requirements:*\n"
            f"• Budget: {_label(BUDGET_LABELS, answers.budget)}\n"
            f"• Quantity: {_label(QUANTITY_LABELS, answers.quantity)}\n"
            f"• Function Timing: {_label(TIMING_LABELS, answers.timing)}\n"
            f"• Delivery Location: {answers.location or NOT_SPECIFIED}"
        )

    def render_catalog_intro(self, label: str) -> str:
        return CATALOG_INTRO.format(label=label)

    def render_catalog_fallback(self, label: str) -> str:
        return CATALOG_FALLBACK.format(label=label)
