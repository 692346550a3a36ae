"""Conversation storage module."""

from .store import IConversationStore, InMemoryConversationStore

__all__ = ["IConversationStore", "InMemoryConversationStore"]
