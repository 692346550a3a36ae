"""CatalogDispatcher implementation."""

import asyncio
from dataclasses import dataclass
from pathlib import Path

from ..composer import ResponseComposer
from ..config import Settings
from ..logging_config import get_logger
from ..models import Answers, Prompt
from ..transport import ITransport
from .queue import Outbound, SendQueue, Sleep

logger = get_logger(__name__)

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})


@dataclass(frozen=True)
class CatalogTier:
    """A budget band that gets catalog images."""

    budget_code: str
    label: str
    directory: Path
    image_delay: float


def default_tiers(settings: Settings) -> dict[str, CatalogTier]:
    return {
        "1": CatalogTier(
            "1", "₹50", settings.catalog_dir / "Gifts_Under50", settings.under50_image_delay
        ),
        "2": CatalogTier(
            "2", "₹100", settings.catalog_dir / "Gifts_Under100", settings.under100_image_delay
        ),
    }


def list_images(directory: Path) -> list[Path] | None:
    """Image files in a directory, sorted by name. None if it does not exist."""
    if not directory.is_dir():
        return None
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS
    )


class CatalogDispatcher:
    """Sends the closing sequence once a lead has answered every question."""

    def __init__(
        self,
        transport: ITransport,
        composer: ResponseComposer,
        tiers: dict[str, CatalogTier],
        message_delay: float = 1.0,
        queue: SendQueue | None = None,
        sleep: Sleep | None = None,
    ):
        self._transport = transport
        self._composer = composer
        self._tiers = tiers
        self._message_delay = message_delay
        if queue is None:
            queue = SendQueue(transport, sleep or asyncio.sleep)
        self._queue = queue

    def plan(self, answers: Answers) -> list[Outbound]:
        """Build the outbound sequence for a completed lead."""
        summary = self._composer.render_summary(answers)
        tier = self._tiers.get(answers.budget or "")

        if tier is None:
            return [
                Outbound(text=summary, delay=self._message_delay),
                Outbound(text=self._composer.render(Prompt.THANK_YOU)),
            ]

        items = [
            Outbound(text=summary, delay=self._message_delay),
            Outbound(
                text=self._composer.render_catalog_intro(tier.label),
                delay=self._message_delay,
            ),
        ]

        images = list_images(tier.directory)
        if not images:
            logger.info(
                "No catalog images in %s, sending fallback message", tier.directory
            )
            items.append(Outbound(text=self._composer.render_catalog_fallback(tier.label)))
            return items

        items.extend(Outbound(media_path=path, delay=tier.image_delay) for path in images)
        items.append(Outbound(text=self._composer.render(Prompt.CATALOG_CLOSING)))
        return items

    async def dispatch(self, conversation_id: str, answers: Answers) -> None:
        """Send summary and catalog. Degrades to summary plus fallback text."""
        try:
            items = self.plan(answers)
            failed = await self._queue.drain(conversation_id, items)
            if failed:
                logger.warning(
                    "%d catalog image(s) failed for %s",
                    failed,
                    conversation_id,
                    extra={"conversation_id": conversation_id},
                )
        except Exception as e:
            logger.error(
                "Catalog dispatch failed for %s: %s",
                conversation_id,
                e,
                exc_info=True,
                extra={"conversation_id": conversation_id},
            )
            await self._send_fallback(conversation_id, answers)

    async def _send_fallback(self, conversation_id: str, answers: Answers) -> None:
        tier = self._tiers.get(answers.budget or "")
        if tier is None:
            fallback = self._composer.render(Prompt.THANK_YOU)
        else:
            fallback = self._composer.render_catalog_fallback(tier.label)

        await self._transport.send_text(
            conversation_id, self._composer.render_summary(answers)
        )
        await self._transport.send_text(conversation_id, fallback)
