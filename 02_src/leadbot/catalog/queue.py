"""Paced outbound send queue."""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable

from ..logging_config import get_logger
from ..models import MediaFile
from ..transport import ITransport

logger = get_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class Outbound:
    """One queued message: either text or a media file."""

    text: str | None = None
    media_path: Path | None = None
    delay: float = 0.0  # pause after this item


class SendQueue:
    """Sends a batch in order, pausing between items.

    Text failures propagate. Media failures are logged and skipped.
    """

    def __init__(self, transport: ITransport, sleep: Sleep = asyncio.sleep):
        self._transport = transport
        self._sleep = sleep

    async def drain(self, conversation_id: str, items: list[Outbound]) -> int:
        """Send all items. Returns the number of media files that failed."""
        failed = 0
        for item in items:
            if item.media_path is not None:
                if not await self._send_media(conversation_id, item.media_path):
                    failed += 1
            elif item.text is not None:
                await self._transport.send_text(conversation_id, item.text)

            if item.delay > 0:
                await self._sleep(item.delay)
        return failed

    async def _send_media(self, conversation_id: str, path: Path) -> bool:
        try:
            media = MediaFile.from_path(path)
            await self._transport.send_media(conversation_id, media)
        except Exception as e:
            logger.error(
                "Error sending image %s: %s",
                path.name,
                e,
                extra={"conversation_id": conversation_id},
            )
            return False
        return True
