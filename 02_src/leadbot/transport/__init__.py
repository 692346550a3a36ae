"""Messaging transport module."""

from .gateway import DeliveryError, GatewayTransport, ITransport

__all__ = ["DeliveryError", "GatewayTransport", "ITransport"]
