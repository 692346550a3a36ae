"""Catalog dispatch module."""

from .dispatcher import CatalogDispatcher, CatalogTier, default_tiers, list_images
from .queue import Outbound, SendQueue

__all__ = [
    "CatalogDispatcher",
    "CatalogTier",
    "default_tiers",
    "list_images",
    "Outbound",
    "SendQueue",
]
