"""Inbound event and outbound media models."""

import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Awaitable, Callable

QuotedSenderResolver = Callable[[], Awaitable[str | None]]


class MessageKind(str, Enum):
    """What an inbound event means to the bot."""

    IGNORE = "ignore"
    HUMAN_AGENT_MARKER = "human_agent_marker"
    RESET_COMMAND = "reset_command"
    SELF_ECHO = "self_echo"
    CUSTOMER_MESSAGE = "customer_message"


@dataclass
class InboundEvent:
    """A message event as delivered by the transport."""

    chat_id: str  # conversation the message belongs to
    sender_id: str
    body: str
    from_self: bool = False
    has_quoted: bool = False
    quoted_sender_id: str | None = None
    quoted_resolver: QuotedSenderResolver | None = field(default=None, repr=False)

    async def resolve_quoted_sender(self) -> str | None:
        """Return the sender of the quoted message, if any."""
        if self.quoted_sender_id:
            return self.quoted_sender_id
        if self.quoted_resolver is not None:
            return await self.quoted_resolver()
        return None


@dataclass(frozen=True)
class Classification:
    """Result of classifying an InboundEvent."""

    kind: MessageKind
    conversation_id: str
    text: str = ""  # trimmed lowercase body
    raw_text: str = ""


@dataclass
class MediaFile:
    """An attachment ready to be sent."""

    filename: str
    mimetype: str
    data: bytes

    @classmethod
    def from_path(cls, path: str | Path) -> "MediaFile":
        """Load a file from disk."""
        path = Path(path)
        mimetype, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            mimetype=mimetype or "application/octet-stream",
            data=path.read_bytes(),
        )
