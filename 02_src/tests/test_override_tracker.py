"""Tests for OverrideTracker."""

from leadbot.models import Step


class TestOverrideTracker:
    def test_not_overridden_by_default(self, overrides):
        assert overrides.is_overridden("chat1") is False

    def test_mark_without_record(self, overrides, store):
        overrides.mark_override("chat1")
        assert overrides.is_overridden("chat1")
        assert store.get("chat1") is None

    def test_mark_forces_step(self, overrides, store):
        conv = store.create("chat1")
        conv.step = Step.BUDGET
        overrides.mark_override("chat1")
        assert store.get("chat1").step == Step.HUMAN_OVERRIDE

    def test_mark_is_per_conversation(self, overrides, store):
        store.create("chat1")
        store.create("chat2")
        overrides.mark_override("chat1")
        assert not overrides.is_overridden("chat2")
        assert store.get("chat2").step == Step.START

    def test_clear_removes_flag_and_record(self, overrides, store):
        store.create("chat1")
        overrides.mark_override("chat1")
        overrides.clear("chat1")
        assert not overrides.is_overridden("chat1")
        assert store.get("chat1") is None

    def test_clear_unknown_is_noop(self, overrides):
        overrides.clear("nobody")
        assert overrides.overridden_ids() == []

    def test_overridden_ids(self, overrides):
        overrides.mark_override("b")
        overrides.mark_override("a")
        assert overrides.overridden_ids() == ["a", "b"]
