"""Scripted WhatsApp lead qualification bot."""

from .app import Application, IApplication
from .catalog import CatalogDispatcher, CatalogTier, SendQueue
from .classifier import MessageClassifier
from .composer import ResponseComposer
from .config import Settings
from .dialogue import DialogueEngine, IDialogueEngine, advance
from .event_bus import EventBus, IEventBus, Topic
from .models import (
    Answers,
    Classification,
    Conversation,
    InboundEvent,
    MediaFile,
    MessageKind,
    Prompt,
    Step,
    TransportState,
)
from .override import OverrideTracker
from .storage import IConversationStore, InMemoryConversationStore
from .transport import DeliveryError, GatewayTransport, ITransport

__all__ = [
    # Application
    "Application",
    "IApplication",
    "Settings",
    # Models
    "Step",
    "Answers",
    "Conversation",
    "InboundEvent",
    "Classification",
    "MessageKind",
    "MediaFile",
    "Prompt",
    "TransportState",
    # Components
    "MessageClassifier",
    "OverrideTracker",
    "IConversationStore",
    "InMemoryConversationStore",
    "IDialogueEngine",
    "DialogueEngine",
    "advance",
    "ResponseComposer",
    "CatalogDispatcher",
    "CatalogTier",
    "SendQueue",
    "IEventBus",
    "EventBus",
    "Topic",
    "ITransport",
    "GatewayTransport",
    "DeliveryError",
]
