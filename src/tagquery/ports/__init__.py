"""Ports (interfaces) for external dependencies."""

from .item_store import ItemPage, ItemRecord, ItemStorePort

__all__ = [
    "ItemPage",
    "ItemRecord",
    "ItemStorePort",
]
