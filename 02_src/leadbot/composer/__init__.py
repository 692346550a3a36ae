"""Response composer module."""

from .composer import ResponseComposer

__all__ = ["ResponseComposer"]
