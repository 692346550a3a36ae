"""Gateway webhook payload models."""

from typing import Any

from pydantic import BaseModel

from ..models import InboundEvent, LifecycleEvent, LifecycleKind


class WebhookKey(BaseModel):
    remoteJid: str
    fromMe: bool = False
    id: str | None = None
    participant: str | None = None


class ContextInfo(BaseModel):
    stanzaId: str | None = None
    participant: str | None = None
    quotedMessage: dict[str, Any] | None = None


class ExtendedTextMessage(BaseModel):
    text: str | None = None
    contextInfo: ContextInfo | None = None


class ImageMessage(BaseModel):
    caption: str | None = None
    contextInfo: ContextInfo | None = None


class WebhookMessage(BaseModel):
    conversation: str | None = None
    extendedTextMessage: ExtendedTextMessage | None = None
    imageMessage: ImageMessage | None = None


class WebhookData(BaseModel):
    key: WebhookKey | None = None
    message: WebhookMessage | None = None
    pushName: str | None = None
    # connection.update / qrcode.updated
    state: str | None = None
    statusReason: int | None = None
    qrcode: dict[str, Any] | None = None


class WebhookEvent(BaseModel):
    event: str
    instance: str | None = None
    data: WebhookData


MESSAGE_EVENTS = frozenset({"messages.upsert", "send.message"})


def _context_info(message: WebhookMessage | None) -> ContextInfo | None:
    if message is None:
        return None
    if message.extendedTextMessage and message.extendedTextMessage.contextInfo:
        return message.extendedTextMessage.contextInfo
    if message.imageMessage and message.imageMessage.contextInfo:
        return message.imageMessage.contextInfo
    return None


def _body(message: WebhookMessage | None) -> str:
    if message is None:
        return ""
    if message.conversation is not None:
        return message.conversation
    if message.extendedTextMessage and message.extendedTextMessage.text is not None:
        return message.extendedTextMessage.text
    if message.imageMessage and message.imageMessage.caption is not None:
        return message.imageMessage.caption
    return ""


def to_inbound_event(event: WebhookEvent) -> InboundEvent | None:
    """Convert a message webhook into an InboundEvent, or None if not a message."""
    if event.event not in MESSAGE_EVENTS or event.data.key is None:
        return None

    key = event.data.key
    context = _context_info(event.data.message)
    has_quoted = context is not None and (
        context.quotedMessage is not None or context.stanzaId is not None
    )

    quoted_sender = None
    if has_quoted:
        # In one-to-one chats the quoted author is the chat partner unless
        # the gateway says otherwise.
        quoted_sender = context.participant or key.remoteJid

    return InboundEvent(
        chat_id=key.remoteJid,
        sender_id=key.participant or key.remoteJid,
        body=_body(event.data.message),
        from_self=key.fromMe,
        has_quoted=has_quoted,
        quoted_sender_id=quoted_sender,
    )


def to_lifecycle_event(event: WebhookEvent) -> LifecycleEvent | None:
    """Convert a connection/QR webhook into a LifecycleEvent."""
    if event.event == "qrcode.updated":
        qrcode = event.data.qrcode or {}
        return LifecycleEvent(
            LifecycleKind.QR, qrcode.get("base64") or qrcode.get("code")
        )

    if event.event == "connection.update":
        state = (event.data.state or "").lower()
        reason = str(event.data.statusReason) if event.data.statusReason else None
        if state == "open":
            return LifecycleEvent(LifecycleKind.READY)
        if state == "close":
            # 401 is the gateway's logged-out/unauthorized code.
            if event.data.statusReason == 401:
                return LifecycleEvent(LifecycleKind.AUTH_FAILURE, reason)
            return LifecycleEvent(LifecycleKind.DISCONNECTED, reason)
        return None

    return None
