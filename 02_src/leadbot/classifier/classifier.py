"""MessageClassifier implementation."""

from ..config import Settings
from ..models import Classification, InboundEvent, MessageKind

GROUP_SUFFIX = "@g.us"
BROADCAST_MARKERS = ("status@broadcast", "@broadcast")


def is_group_or_broadcast(address: str) -> bool:
    """True for group chats and status/broadcast lists."""
    return address.endswith(GROUP_SUFFIX) or any(
        marker in address for marker in BROADCAST_MARKERS
    )


class MessageClassifier:
    """Tags inbound events. Pure: no state, no I/O."""

    def __init__(self, settings: Settings):
        self._marker = settings.human_agent_marker
        self._reset_command = settings.reset_command
        self._quoted_reply_is_takeover = settings.quoted_reply_is_takeover

    def classify(self, event: InboundEvent) -> Classification:
        """Classify one event."""
        if is_group_or_broadcast(event.chat_id) or is_group_or_broadcast(
            event.sender_id
        ):
            return Classification(MessageKind.IGNORE, event.chat_id)

        if event.from_self:
            return Classification(self._classify_self_sent(event), event.chat_id)

        return Classification(
            MessageKind.CUSTOMER_MESSAGE,
            event.chat_id,
            text=event.body.strip().lower(),
            raw_text=event.body,
        )

    def _classify_self_sent(self, event: InboundEvent) -> MessageKind:
        body = event.body.strip()

        if event.has_quoted and body == self._reset_command:
            return MessageKind.RESET_COMMAND

        if self._marker and self._marker in event.body:
            return MessageKind.HUMAN_AGENT_MARKER

        # Replying to a customer's message from the bot's phone is taken as a
        # manual takeover unless disabled.
        if event.has_quoted and self._quoted_reply_is_takeover:
            return MessageKind.HUMAN_AGENT_MARKER

        return MessageKind.SELF_ECHO
