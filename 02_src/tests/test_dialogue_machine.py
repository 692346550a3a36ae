"""Tests for the transition function."""

import pytest

from leadbot.dialogue.machine import advance, apply_transition
from leadbot.models import (
    Conversation,
    EffectKind,
    NO_EFFECT,
    Prompt,
    Step,
)


def at(step: Step, **counts) -> Conversation:
    conv = Conversation(id="chat1", step=step)
    for name, value in counts.items():
        conv.error_count[Step(name)] = value
    return conv


class TestStart:
    @pytest.mark.parametrize("text", ["1", "yes"])
    def test_qualified(self, text):
        t = advance(at(Step.START), text, text)
        assert t.step == Step.FUNCTION_TIME
        assert t.effect.prompt == Prompt.TIMING
        assert t.answer is None

    @pytest.mark.parametrize("text", ["2", "no"])
    def test_disqualified(self, text):
        t = advance(at(Step.START), text, text)
        assert t.step == Step.COMPLETED
        assert t.effect.prompt == Prompt.NOT_INTERESTED

    def test_invalid(self):
        t = advance(at(Step.START), "maybe", "maybe")
        assert t.step == Step.START
        assert t.effect.prompt == Prompt.ERROR_START
        assert t.error_step == Step.START


class TestOptionSteps:
    @pytest.mark.parametrize(
        "step,text,field,next_step,prompt",
        [
            (Step.FUNCTION_TIME, "4", "timing", Step.BUDGET, Prompt.BUDGET),
            (Step.BUDGET, "5", "budget", Step.PIECE_COUNT, Prompt.QUANTITY),
            (Step.PIECE_COUNT, "1", "quantity", Step.LOCATION, Prompt.LOCATION),
        ],
    )
    def test_valid(self, step, text, field, next_step, prompt):
        t = advance(at(step), text, text)
        assert t.step == next_step
        assert t.effect.prompt == prompt
        assert t.answer == (field, text)
        assert t.error_step is None

    @pytest.mark.parametrize(
        "step,text",
        [
            (Step.FUNCTION_TIME, "5"),
            (Step.BUDGET, "6"),
            (Step.PIECE_COUNT, "0"),
            (Step.BUDGET, "yes"),
        ],
    )
    def test_out_of_range(self, step, text):
        t = advance(at(step), text, text)
        assert t.step == step
        assert t.effect.prompt == Prompt.retry_for(step)
        assert t.error_step == step


class TestRetryPolicy:
    def test_second_failure_still_retries(self):
        t = advance(at(Step.BUDGET, budget=1), "x", "x")
        assert t.step == Step.BUDGET
        assert t.effect.prompt == Prompt.ERROR_BUDGET

    def test_third_failure_hands_off(self):
        t = advance(at(Step.BUDGET, budget=2), "x", "x")
        assert t.step == Step.COMPLETED
        assert t.effect.prompt == Prompt.HUMAN_HANDOFF
        assert t.error_step == Step.BUDGET

    def test_counts_are_per_step(self):
        t = advance(at(Step.BUDGET, start=2, function_time=2), "x", "x")
        assert t.step == Step.BUDGET

    def test_custom_max_attempts(self):
        t = advance(at(Step.START), "x", "x", max_attempts=1)
        assert t.step == Step.COMPLETED
        assert t.effect.prompt == Prompt.HUMAN_HANDOFF


class TestLocation:
    def test_keeps_case(self):
        t = advance(at(Step.LOCATION), "mumbai", "  Mumbai, Andheri ")
        assert t.step == Step.COMPLETED
        assert t.effect.kind == EffectKind.DISPATCH
        assert t.answer == ("location", "Mumbai, Andheri")

    def test_empty_is_noop(self):
        t = advance(at(Step.LOCATION), "", "   ")
        assert t.step == Step.LOCATION
        assert t.effect == NO_EFFECT


class TestTerminal:
    @pytest.mark.parametrize("step", [Step.COMPLETED, Step.HUMAN_OVERRIDE])
    @pytest.mark.parametrize("text", ["1", "yes", "hello"])
    def test_never_leaves(self, step, text):
        t = advance(at(step), text, text)
        assert t.step == step
        assert t.effect == NO_EFFECT


class TestApplyTransition:
    def test_records_answer_and_step(self):
        conv = at(Step.FUNCTION_TIME)
        apply_transition(conv, advance(conv, "3", "3"))
        assert conv.step == Step.BUDGET
        assert conv.answers.timing == "3"

    def test_counts_error(self):
        conv = at(Step.START)
        apply_transition(conv, advance(conv, "x", "x"))
        apply_transition(conv, advance(conv, "y", "y"))
        assert conv.error_count[Step.START] == 2
        assert conv.step == Step.START

    def test_answer_written_once(self):
        conv = at(Step.BUDGET)
        conv.answers.budget = "1"
        apply_transition(conv, advance(conv, "4", "4"))
        assert conv.answers.budget == "1"

    def test_script_never_regresses(self):
        order = [
            Step.START,
            Step.FUNCTION_TIME,
            Step.BUDGET,
            Step.PIECE_COUNT,
            Step.LOCATION,
            Step.COMPLETED,
        ]
        conv = at(Step.START)
        for text in ["x", "1", "9", "2", "bad", "3", "4", "Pune", "1"]:
            before = order.index(conv.step)
            apply_transition(conv, advance(conv, text.lower(), text))
            assert order.index(conv.step) >= before
        assert conv.step == Step.COMPLETED
