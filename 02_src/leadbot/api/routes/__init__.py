"""API routes."""

from .control import create_control_router
from .status import create_status_router
from .webhook import create_webhook_router

__all__ = ["create_control_router", "create_status_router", "create_webhook_router"]
