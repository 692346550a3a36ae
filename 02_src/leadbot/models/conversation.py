"""Conversation state models."""

from dataclasses import dataclass, field
from enum import Enum


class Step(str, Enum):
    """Position in the qualification script."""

    START = "start"
    FUNCTION_TIME = "function_time"
    BUDGET = "budget"
    PIECE_COUNT = "piece_count"
    LOCATION = "location"
    COMPLETED = "completed"
    HUMAN_OVERRIDE = "human_override"

    @property
    def is_terminal(self) -> bool:
        return self in (Step.COMPLETED, Step.HUMAN_OVERRIDE)


# Steps that validate against a bounded option set and carry an error budget.
VALIDATED_STEPS = (Step.START, Step.FUNCTION_TIME, Step.BUDGET, Step.PIECE_COUNT)


def _zero_counts() -> dict[Step, int]:
    return {step: 0 for step in VALIDATED_STEPS}


@dataclass
class Answers:
    """Answers collected during the script."""

    timing: str | None = None
    budget: str | None = None
    quantity: str | None = None
    location: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "timing": self.timing,
            "budget": self.budget,
            "quantity": self.quantity,
            "location": self.location,
        }


@dataclass
class Conversation:
    """Per-conversation record."""

    id: str
    step: Step = Step.START
    answers: Answers = field(default_factory=Answers)
    error_count: dict[Step, int] = field(default_factory=_zero_counts)
