"""Transport lifecycle models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TransportState(str, Enum):
    INITIALIZING = "initializing"
    QR = "qr"
    READY = "ready"
    DISCONNECTED = "disconnected"
    AUTH_FAILURE = "auth_failure"

    @property
    def accepts_messages(self) -> bool:
        return self not in (TransportState.DISCONNECTED, TransportState.AUTH_FAILURE)


class LifecycleKind(str, Enum):
    """Lifecycle events raised by the messaging transport."""

    QR = "qr"
    READY = "ready"
    AUTHENTICATED = "authenticated"
    AUTH_FAILURE = "auth_failure"
    DISCONNECTED = "disconnected"


@dataclass
class LifecycleEvent:
    kind: LifecycleKind
    detail: str | None = None  # QR payload or failure/disconnect reason


@dataclass
class TransportStatus:
    """Current connection state of the transport."""

    state: TransportState = TransportState.INITIALIZING
    qr_code: str | None = None
    detail: str | None = None
    updated_at: datetime | None = None
