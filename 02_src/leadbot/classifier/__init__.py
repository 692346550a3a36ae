"""Message classifier module."""

from .classifier import MessageClassifier

__all__ = ["MessageClassifier"]
