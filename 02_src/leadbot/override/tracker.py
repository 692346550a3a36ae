"""OverrideTracker implementation."""

from ..logging_config import get_logger
from ..models import Step
from ..storage import IConversationStore

logger = get_logger(__name__)


class OverrideTracker:
    """Per-conversation human takeover flags."""

    def __init__(self, store: IConversationStore):
        self._store = store
        self._overridden: set[str] = set()

    def mark_override(self, conversation_id: str) -> None:
        """Silence the bot for a conversation until cleared."""
        self._overridden.add(conversation_id)

        conversation = self._store.get(conversation_id)
        if conversation is not None:
            conversation.step = Step.HUMAN_OVERRIDE
            self._store.update(conversation)

        logger.info(
            "Human agent has taken over conversation with %s",
            conversation_id,
            extra={"conversation_id": conversation_id},
        )

    def is_overridden(self, conversation_id: str) -> bool:
        return conversation_id in self._overridden

    def clear(self, conversation_id: str) -> None:
        """Remove the flag and forget the conversation entirely."""
        self._overridden.discard(conversation_id)
        self._store.delete(conversation_id)
        logger.info(
            "Bot re-enabled for %s",
            conversation_id,
            extra={"conversation_id": conversation_id},
        )

    def overridden_ids(self) -> list[str]:
        return sorted(self._overridden)
