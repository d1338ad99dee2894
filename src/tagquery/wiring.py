"""Composition root: the single place where services meet their adapters.

Call ``build_search_service()`` to get a fully-constructed service with the
store selected by ``RuntimeSettings.store_backend``.
"""

from __future__ import annotations

from pathlib import Path

from .adapters.memory_item_store import MemoryItemStore, load_items_file
from .adapters.qdrant_item_store import QdrantItemStore
from .config.runtime import RuntimeSettings, StoreBackend, get_settings
from .interface.observability import get_logger
from .ports.item_store import ItemStorePort
from .services.search_service import SearchService


def build_item_store(settings: RuntimeSettings | None = None) -> ItemStorePort:
    """Construct the configured ItemStorePort."""
    settings = settings or get_settings()
    if settings.store_backend == StoreBackend.memory:
        if settings.memory_items_file:
            return MemoryItemStore(load_items_file(Path(settings.memory_items_file)))
        return MemoryItemStore()
    return QdrantItemStore(settings)


def build_search_service(
    settings: RuntimeSettings | None = None,
    item_store: ItemStorePort | None = None,
) -> SearchService:
    """Construct a SearchService with real adapters."""
    settings = settings or get_settings()
    return SearchService(
        item_store=item_store or build_item_store(settings),
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
        logger=get_logger(),
    )
