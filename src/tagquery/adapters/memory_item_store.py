"""Adapter: in-process ItemStorePort that evaluates predicates directly."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from ..domain.predicates import And, Or, Overlaps
from ..ports.item_store import ItemPage, ItemRecord


def predicate_matches(predicate: Overlaps | And | Or, tag_ids: Iterable[int]) -> bool:
    """Evaluate a predicate tree against one item's tag ids."""
    tags = tag_ids if isinstance(tag_ids, (set, frozenset)) else set(tag_ids)
    if isinstance(predicate, Overlaps):
        # isdisjoint() is True for an empty id set, so an empty overlap is False.
        return (not predicate.ids.isdisjoint(tags)) == predicate.must_overlap
    if isinstance(predicate, And):
        return all(predicate_matches(c, tags) for c in predicate.children)
    if isinstance(predicate, Or):
        return any(predicate_matches(c, tags) for c in predicate.children)
    raise ValueError(f"Unsupported predicate node: {predicate!r}")


class MemoryItemStore:
    """Concrete ItemStorePort backed by a dict, in insertion order."""

    def __init__(self, items: Iterable[ItemRecord] | None = None) -> None:
        self._items: dict[int | str, ItemRecord] = {}
        if items:
            self.upsert_items(list(items))

    def find(
        self,
        predicate: Overlaps | And | Or | None,
        title: str | None,
        offset: int,
        limit: int,
    ) -> ItemPage:
        matched = [
            item
            for item in self._items.values()
            if (predicate is None or predicate_matches(predicate, item.tag_ids))
            and _title_matches(title, item.title)
        ]
        return ItemPage(total=len(matched), items=matched[offset : offset + limit])

    def ensure_collection(self) -> dict:
        return {"name": "memory", "created": False}

    def delete_collection(self) -> None:
        self._items.clear()

    def upsert_items(self, items: list[ItemRecord]) -> int:
        for item in items:
            self._items[item.item_id] = item
        return len(items)


def _title_matches(title: str | None, candidate: str) -> bool:
    if not title:
        return True
    return title.lower() in candidate.lower()


def load_items_file(path: Path) -> list[ItemRecord]:
    """Load item records from a JSON list. Raises on missing file or invalid JSON/schema."""
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a JSON list of items, got {type(raw).__name__}")
    return [ItemRecord.model_validate(item) for item in raw]
