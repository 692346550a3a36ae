"""Qualification script as a pure transition function.

``advance`` never mutates the conversation it is given; the engine applies
the returned Transition to the store and then performs its effect.
"""

from ..models import (
    DISPATCH,
    NO_EFFECT,
    Conversation,
    Effect,
    Prompt,
    Step,
    Transition,
)

DEFAULT_MAX_ATTEMPTS = 3

QUALIFIED_INPUTS = frozenset({"1", "yes"})
DISQUALIFIED_INPUTS = frozenset({"2", "no"})

# step -> (valid options, answer field, next step, next prompt)
_OPTION_STEPS: dict[Step, tuple[frozenset[str], str, Step, Prompt]] = {
    Step.FUNCTION_TIME: (
        frozenset({"1", "2", "3", "4"}),
        "timing",
        Step.BUDGET,
        Prompt.BUDGET,
    ),
    Step.BUDGET: (
        frozenset({"1", "2", "3", "4", "5"}),
        "budget",
        Step.PIECE_COUNT,
        Prompt.QUANTITY,
    ),
    Step.PIECE_COUNT: (
        frozenset({"1", "2", "3", "4", "5"}),
        "quantity",
        Step.LOCATION,
        Prompt.LOCATION,
    ),
}


def advance(
    conversation: Conversation,
    text: str,
    raw_text: str,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Transition:
    """Evaluate one customer reply against the conversation's current step.

    Args:
        conversation: Current record (read only).
        text: Reply, trimmed and lowercased.
        raw_text: Reply as received; used for free-text answers.
        max_attempts: Invalid replies allowed per step before handoff.

    Returns:
        The Transition to apply.
    """
    step = conversation.step

    if step.is_terminal:
        return Transition(step=step, effect=NO_EFFECT)

    if step == Step.START:
        if text in QUALIFIED_INPUTS:
            return Transition(Step.FUNCTION_TIME, Effect.reply(Prompt.TIMING))
        if text in DISQUALIFIED_INPUTS:
            return Transition(Step.COMPLETED, Effect.reply(Prompt.NOT_INTERESTED))
        return _invalid(conversation, max_attempts)

    if step == Step.LOCATION:
        location = raw_text.strip()
        if not location:
            return Transition(step=step, effect=NO_EFFECT)
        return Transition(Step.COMPLETED, DISPATCH, answer=("location", location))

    options, field_name, next_step, next_prompt = _OPTION_STEPS[step]
    if text in options:
        return Transition(
            next_step, Effect.reply(next_prompt), answer=(field_name, text)
        )
    return _invalid(conversation, max_attempts)


def _invalid(conversation: Conversation, max_attempts: int) -> Transition:
    step = conversation.step
    attempts = conversation.error_count.get(step, 0) + 1

    if attempts >= max_attempts:
        return Transition(
            Step.COMPLETED, Effect.reply(Prompt.HUMAN_HANDOFF), error_step=step
        )
    return Transition(step, Effect.reply(Prompt.retry_for(step)), error_step=step)


def apply_transition(conversation: Conversation, transition: Transition) -> None:
    """Write a transition into a conversation record."""
    if transition.error_step is not None:
        conversation.error_count[transition.error_step] = (
            conversation.error_count.get(transition.error_step, 0) + 1
        )

    if transition.answer is not None:
        field_name, value = transition.answer
        # Each answer is collected once, at its own step.
        if getattr(conversation.answers, field_name) is None:
            setattr(conversation.answers, field_name, value)

    conversation.step = transition.step
