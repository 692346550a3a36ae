"""Application bootstrap and lifecycle management."""

from datetime import datetime, timezone
from typing import Protocol

from .catalog import CatalogDispatcher, default_tiers
from .classifier import MessageClassifier
from .composer import ResponseComposer
from .config import Settings
from .dialogue import DialogueEngine
from .event_bus import EventBus, Topic
from .keepalive import KeepAlive
from .logging_config import get_logger
from .models import (
    InboundEvent,
    LifecycleEvent,
    LifecycleKind,
    TransportState,
    TransportStatus,
)
from .override import OverrideTracker
from .storage import InMemoryConversationStore
from .transport import GatewayTransport, ITransport

logger = get_logger(__name__)

_LIFECYCLE_STATES = {
    LifecycleKind.QR: TransportState.QR,
    LifecycleKind.READY: TransportState.READY,
    LifecycleKind.AUTHENTICATED: TransportState.READY,
    LifecycleKind.AUTH_FAILURE: TransportState.AUTH_FAILURE,
    LifecycleKind.DISCONNECTED: TransportState.DISCONNECTED,
}


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def publish_message(self, event: InboundEvent) -> None:
        """Feed an inbound message event to the bot."""
        ...

    async def publish_lifecycle(self, event: LifecycleEvent) -> None:
        """Feed a transport lifecycle event to the bot."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: ITransport | None = None,
    ):
        self._settings = settings or Settings.from_env()
        self._transport: ITransport | None = transport
        self._owns_transport = transport is None

        # Components (will be initialized in start())
        self._store: InMemoryConversationStore | None = None
        self._overrides: OverrideTracker | None = None
        self._engine: DialogueEngine | None = None
        self._event_bus: EventBus | None = None
        self._keepalive: KeepAlive | None = None
        self.status = TransportStatus()

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")
        settings = self._settings

        # 1. Transport (external collaborator)
        if self._transport is None:
            gateway = GatewayTransport(
                settings.whatsapp_server_url,
                settings.whatsapp_server_api_key,
                settings.whatsapp_server_instance_name,
            )
            if not gateway.configured:
                logger.warning(
                    "WhatsApp server settings are not configured. Outbound sends will fail."
                )
            self._transport = gateway
        if isinstance(self._transport, GatewayTransport):
            await self._transport.start()

        # 2. State (store + override flags)
        self._store = InMemoryConversationStore()
        self._overrides = OverrideTracker(self._store)

        # 3. Composer and catalog dispatcher
        composer = ResponseComposer()
        dispatcher = CatalogDispatcher(
            transport=self._transport,
            composer=composer,
            tiers=default_tiers(settings),
            message_delay=settings.message_delay,
        )

        # 4. DialogueEngine
        self._engine = DialogueEngine(
            store=self._store,
            overrides=self._overrides,
            classifier=MessageClassifier(settings),
            composer=composer,
            dispatcher=dispatcher,
            transport=self._transport,
            max_attempts=settings.max_attempts,
        )

        # 5. EventBus
        self._event_bus = EventBus()
        self._event_bus.subscribe(Topic.MESSAGE, self._on_message)
        self._event_bus.subscribe(Topic.LIFECYCLE, self._on_lifecycle)

        # 6. Keep-alive
        if settings.keepalive_url:
            self._keepalive = KeepAlive(
                settings.keepalive_url, settings.keepalive_interval
            )
            await self._keepalive.start()
            logger.info("Keep-alive started for %s", settings.keepalive_url)

        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._keepalive:
            await self._keepalive.stop()
        if self._event_bus:
            self._event_bus.clear()
        if self._owns_transport and isinstance(self._transport, GatewayTransport):
            await self._transport.close()
        logger.info("Application stopped")

    async def publish_message(self, event: InboundEvent) -> None:
        """Feed an inbound message event to the bot."""
        if not self._event_bus:
            raise RuntimeError("Application not started")
        await self._event_bus.publish(Topic.MESSAGE, event)

    async def publish_lifecycle(self, event: LifecycleEvent) -> None:
        """Feed a transport lifecycle event to the bot."""
        if not self._event_bus:
            raise RuntimeError("Application not started")
        await self._event_bus.publish(Topic.LIFECYCLE, event)

    async def _on_message(self, event: InboundEvent) -> None:
        if not self.status.state.accepts_messages:
            logger.warning(
                "Transport is %s, dropping message for %s",
                self.status.state.value,
                event.chat_id,
            )
            return
        await self.engine.handle_event(event)

    async def _on_lifecycle(self, event: LifecycleEvent) -> None:
        state = _LIFECYCLE_STATES[event.kind]
        self.status.state = state
        self.status.detail = event.detail
        self.status.updated_at = datetime.now(timezone.utc)
        # The QR is only useful until the session is authenticated.
        self.status.qr_code = event.detail if event.kind == LifecycleKind.QR else None

        if state in (TransportState.AUTH_FAILURE, TransportState.DISCONNECTED):
            logger.error("Transport %s: %s", state.value, event.detail)
        else:
            logger.info("Transport %s", state.value)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def engine(self) -> DialogueEngine:
        """Get dialogue engine instance."""
        if not self._engine:
            raise RuntimeError("Application not started")
        return self._engine
