"""Core data models for the lead qualification bot."""

from .conversation import VALIDATED_STEPS, Answers, Conversation, Step
from .effects import DISPATCH, NO_EFFECT, Effect, EffectKind, Prompt, Transition
from .messages import Classification, InboundEvent, MediaFile, MessageKind
from .transport import LifecycleEvent, LifecycleKind, TransportState, TransportStatus

__all__ = [
    # Conversation
    "Step",
    "VALIDATED_STEPS",
    "Answers",
    "Conversation",
    # Effects
    "Prompt",
    "EffectKind",
    "Effect",
    "NO_EFFECT",
    "DISPATCH",
    "Transition",
    # Messages
    "MessageKind",
    "InboundEvent",
    "Classification",
    "MediaFile",
    # Transport
    "TransportState",
    "TransportStatus",
    "LifecycleKind",
    "LifecycleEvent",
]
