"""Adapters (concrete implementations of ports)."""

from .memory_item_store import MemoryItemStore, load_items_file, predicate_matches
from .qdrant_item_store import QdrantItemStore

__all__ = ["MemoryItemStore", "QdrantItemStore", "load_items_file", "predicate_matches"]
