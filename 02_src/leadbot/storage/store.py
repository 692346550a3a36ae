"""In-memory conversation store."""

from typing import Protocol

from ..models import Conversation


class IConversationStore(Protocol):
    """Per-conversation state, keyed by conversation id."""

    def get(self, conversation_id: str) -> Conversation | None:
        """Get a conversation, or None if unseen."""
        ...

    def create(self, conversation_id: str) -> Conversation:
        """Create a fresh conversation at the start step."""
        ...

    def update(self, conversation: Conversation) -> None:
        """Persist changes to a conversation."""
        ...

    def delete(self, conversation_id: str) -> bool:
        """Delete a conversation. Returns True if it existed."""
        ...

    def all(self) -> list[Conversation]:
        """All known conversations."""
        ...


class InMemoryConversationStore:
    """Process-lifetime storage. Nothing survives a restart."""

    def __init__(self):
        self._conversations: dict[str, Conversation] = {}

    def get(self, conversation_id: str) -> Conversation | None:
        return self._conversations.get(conversation_id)

    def create(self, conversation_id: str) -> Conversation:
        if conversation_id in self._conversations:
            raise ValueError(f"Conversation already exists: {conversation_id}")
        conversation = Conversation(id=conversation_id)
        self._conversations[conversation_id] = conversation
        return conversation

    def update(self, conversation: Conversation) -> None:
        self._conversations[conversation.id] = conversation

    def delete(self, conversation_id: str) -> bool:
        return self._conversations.pop(conversation_id, None) is not None

    def all(self) -> list[Conversation]:
        return list(self._conversations.values())

    def __len__(self) -> int:
        return len(self._conversations)
