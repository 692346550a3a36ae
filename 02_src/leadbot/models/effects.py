"""Declarative results of a dialogue transition."""

from dataclasses import dataclass
from enum import Enum

from .conversation import Step


class Prompt(str, Enum):
    """Every fixed text the bot can send."""

    WELCOME = "welcome"
    TIMING = "timing"
    BUDGET = "budget"
    QUANTITY = "quantity"
    LOCATION = "location"
    NOT_INTERESTED = "not_interested"
    HUMAN_HANDOFF = "human_handoff"
    ERROR_START = "error_start"
    ERROR_FUNCTION_TIME = "error_function_time"
    ERROR_BUDGET = "error_budget"
    ERROR_PIECE_COUNT = "error_piece_count"
    GENERIC_ERROR = "generic_error"
    BOT_REENABLED = "bot_reenabled"
    THANK_YOU = "thank_you"
    CATALOG_CLOSING = "catalog_closing"

    @classmethod
    def retry_for(cls, step: Step) -> "Prompt":
        return cls(f"error_{step.value}")


class EffectKind(str, Enum):
    NONE = "none"
    REPLY = "reply"
    DISPATCH = "dispatch"


@dataclass(frozen=True)
class Effect:
    """What to send once the transition has been applied."""

    kind: EffectKind
    prompt: Prompt | None = None

    @classmethod
    def reply(cls, prompt: Prompt) -> "Effect":
        return cls(EffectKind.REPLY, prompt)


NO_EFFECT = Effect(EffectKind.NONE)
DISPATCH = Effect(EffectKind.DISPATCH)


@dataclass(frozen=True)
class Transition:
    """Outcome of evaluating one input against the current step."""

    step: Step
    effect: Effect
    answer: tuple[str, str] | None = None  # (field, value) to record
    error_step: Step | None = None  # step whose error counter was spent
