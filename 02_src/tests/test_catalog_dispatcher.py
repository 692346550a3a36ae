"""Tests for CatalogDispatcher."""

import pytest

from conftest import texts_sent
from leadbot.catalog import list_images
from leadbot.models import Answers, Prompt

CHAT = "919800000001@c.us"


def answers(budget: str) -> Answers:
    return Answers(timing="1", budget=budget, quantity="2", location="Pune")


@pytest.fixture
def under50(settings):
    directory = settings.catalog_dir / "Gifts_Under50"
    directory.mkdir(parents=True)
    return directory


class TestListImages:
    def test_missing_directory(self, tmp_path):
        assert list_images(tmp_path / "nope") is None

    def test_filters_and_sorts(self, tmp_path):
        for name in ["b.PNG", "a.jpg", "notes.txt", "c.webp", "d.jpeg", "e.gif"]:
            (tmp_path / name).write_bytes(b"x")
        (tmp_path / "sub.jpg").mkdir()

        names = [p.name for p in list_images(tmp_path)]
        assert names == ["a.jpg", "b.PNG", "c.webp", "d.jpeg", "e.gif"]


class TestTierDispatch:
    @pytest.mark.asyncio
    async def test_sends_images_between_intro_and_closing(
        self, dispatcher, transport, composer, sleep, under50
    ):
        (under50 / "1.jpg").write_bytes(b"one")
        (under50 / "2.png").write_bytes(b"two")

        await dispatcher.dispatch(CHAT, answers("1"))

        assert texts_sent(transport) == [
            composer.render_summary(answers("1")),
            composer.render_catalog_intro("₹50"),
            composer.render(Prompt.CATALOG_CLOSING),
        ]
        sent_files = [c.args[1].filename for c in transport.send_media.await_args_list]
        assert sent_files == ["1.jpg", "2.png"]

    @pytest.mark.asyncio
    async def test_missing_directory_falls_back(self, dispatcher, transport, composer):
        await dispatcher.dispatch(CHAT, answers("1"))

        sent = texts_sent(transport)
        assert sent[0] == composer.render_summary(answers("1"))
        assert sent[-1] == composer.render_catalog_fallback("₹50")
        transport.send_media.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_directory_falls_back(self, dispatcher, transport, composer, under50):
        (under50 / "readme.txt").write_text("no images here")

        await dispatcher.dispatch(CHAT, answers("1"))

        assert texts_sent(transport)[-1] == composer.render_catalog_fallback("₹50")
        transport.send_media.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_second_tier_uses_its_own_directory(
        self, dispatcher, transport, composer, settings, under50
    ):
        (under50 / "cheap.jpg").write_bytes(b"x")
        under100 = settings.catalog_dir / "Gifts_Under100"
        under100.mkdir()
        (under100 / "mid.jpg").write_bytes(b"y")

        await dispatcher.dispatch(CHAT, answers("2"))

        assert composer.render_catalog_intro("₹100") in texts_sent(transport)
        sent_files = [c.args[1].filename for c in transport.send_media.await_args_list]
        assert sent_files == ["mid.jpg"]

    @pytest.mark.asyncio
    async def test_failed_image_does_not_stop_batch(
        self, dispatcher, transport, composer, under50
    ):
        (under50 / "1.jpg").write_bytes(b"one")
        (under50 / "2.jpg").write_bytes(b"two")
        transport.send_media.side_effect = [RuntimeError("too large"), None]

        await dispatcher.dispatch(CHAT, answers("1"))

        assert transport.send_media.await_count == 2
        assert texts_sent(transport)[-1] == composer.render(Prompt.CATALOG_CLOSING)

    @pytest.mark.asyncio
    async def test_pacing_uses_tier_delay(self, transport, composer, settings, sleep, under50):
        from leadbot.catalog import CatalogDispatcher, CatalogTier

        (under50 / "1.jpg").write_bytes(b"one")
        tiers = {"1": CatalogTier("1", "₹50", under50, image_delay=1.5)}
        dispatcher = CatalogDispatcher(
            transport, composer, tiers, message_delay=1.0, sleep=sleep
        )

        await dispatcher.dispatch(CHAT, answers("1"))

        assert [c.args[0] for c in sleep.await_args_list] == [1.0, 1.0, 1.5]


class TestOtherBudgets:
    @pytest.mark.parametrize("budget", ["3", "4", "5"])
    @pytest.mark.asyncio
    async def test_summary_then_thank_you(self, dispatcher, transport, composer, budget):
        await dispatcher.dispatch(CHAT, answers(budget))

        assert texts_sent(transport) == [
            composer.render_summary(answers(budget)),
            composer.render(Prompt.THANK_YOU),
        ]


class TestDegradedDispatch:
    @pytest.mark.asyncio
    async def test_unexpected_error_sends_summary_and_fallback(
        self, dispatcher, transport, composer
    ):
        # First send (summary) fails; the fallback pair goes through.
        transport.send_text.side_effect = [RuntimeError("timeout"), None, None]

        await dispatcher.dispatch(CHAT, answers("1"))

        assert texts_sent(transport)[1:] == [
            composer.render_summary(answers("1")),
            composer.render_catalog_fallback("₹50"),
        ]

    @pytest.mark.asyncio
    async def test_unexpected_error_for_other_budget(self, dispatcher, transport, composer):
        transport.send_text.side_effect = [None, RuntimeError("timeout"), None, None]

        await dispatcher.dispatch(CHAT, answers("4"))

        assert texts_sent(transport)[-1] == composer.render(Prompt.THANK_YOU)
