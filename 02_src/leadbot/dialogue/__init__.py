"""Dialogue module."""

from .engine import DialogueEngine, IDialogueEngine
from .machine import advance, apply_transition

__all__ = ["DialogueEngine", "IDialogueEngine", "advance", "apply_transition"]
