"""WhatsApp gateway client."""

import base64
from typing import Protocol

import httpx

from ..logging_config import get_logger
from ..models import MediaFile

logger = get_logger(__name__)


class DeliveryError(Exception):
    """An outbound message could not be delivered."""


class ITransport(Protocol):
    """Outbound half of the messaging transport."""

    async def send_text(self, conversation_id: str, text: str) -> None:
        """Send a text message."""
        ...

    async def send_media(self, conversation_id: str, media: MediaFile) -> None:
        """Send an attachment."""
        ...


def to_number(conversation_id: str) -> str:
    """Gateway endpoints take the bare number, not the chat address."""
    return conversation_id.split("@", 1)[0]


class GatewayTransport:
    """Sends messages through an Evolution-API style HTTP gateway."""

    def __init__(
        self,
        base_url: str | None,
        api_key: str | None,
        instance_name: str | None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self._base_url = (base_url or "").rstrip("/")
        self._api_key = api_key
        self._instance = instance_name
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout

    @property
    def configured(self) -> bool:
        return all([self._base_url, self._api_key, self._instance])

    async def start(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)

    async def close(self) -> None:
        if self._client and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def send_text(self, conversation_id: str, text: str) -> None:
        await self._post(
            "sendText",
            {"number": to_number(conversation_id), "text": text},
            conversation_id,
        )

    async def send_media(self, conversation_id: str, media: MediaFile) -> None:
        payload = {
            "number": to_number(conversation_id),
            "mediatype": "image" if media.mimetype.startswith("image/") else "document",
            "mimetype": media.mimetype,
            "media": base64.b64encode(media.data).decode("ascii"),
            "fileName": media.filename,
        }
        await self._post("sendMedia", payload, conversation_id)

    async def _post(self, endpoint: str, payload: dict, conversation_id: str) -> None:
        if not self.configured:
            raise DeliveryError("WhatsApp server settings are not configured")
        if self._client is None:
            raise DeliveryError("Gateway transport not started")

        url = f"{self._base_url}/message/{endpoint}/{self._instance}"
        try:
            response = await self._client.post(
                url, headers={"apikey": self._api_key}, json=payload
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DeliveryError(
                f"{endpoint} to {conversation_id} failed: "
                f"{e.response.status_code} {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise DeliveryError(f"{endpoint} to {conversation_id} failed: {e}") from e

        logger.debug(
            "Sent %s to %s",
            endpoint,
            conversation_id,
            extra={"conversation_id": conversation_id},
        )
