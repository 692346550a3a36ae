"""Self-ping loop that keeps free-tier hosts from idling the service."""

import asyncio

import httpx

from .logging_config import get_logger

logger = get_logger(__name__)


class KeepAlive:
    """Pings ``{url}/health`` on a fixed interval."""

    def __init__(
        self,
        url: str,
        interval: float = 840.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._url = url.rstrip("/") + "/health"
        self._interval = interval
        self._client = client
        self._owns_client = client is None
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self.running:
            return
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=10.0)
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        if self._client and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def ping(self) -> int | None:
        """Ping once. Returns the status code, or None on failure."""
        if self._client is None:
            return None
        try:
            response = await self._client.get(self._url)
        except httpx.HTTPError as e:
            logger.warning("Keep-alive error: %s", e)
            return None
        logger.info("Keep-alive ping: %s", response.status_code)
        return response.status_code

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            await self.ping()
