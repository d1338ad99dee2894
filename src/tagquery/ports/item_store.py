"""Port: item store that executes compiled tag predicates."""

from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

from pydantic import BaseModel, Field

from ..domain.predicates import And, Or, Overlaps


class ItemRecord(BaseModel):
    """A searchable item and its tag ids."""

    item_id: Union[int, str] = Field(..., description="Item identifier")
    title: str = Field(default="", description="Item title")
    tag_ids: list[int] = Field(default_factory=list, description="Tag ids attached to the item")


class ItemPage(BaseModel):
    """One page of matches plus the total match count."""

    total: int = Field(..., ge=0, description="Items matching the filter across all pages")
    items: list[ItemRecord] = Field(default_factory=list)


@runtime_checkable
class ItemStorePort(Protocol):
    """Read/write interface for the tagged item collection."""

    # --- queries ---

    def find(
        self,
        predicate: Overlaps | And | Or | None,
        title: str | None,
        offset: int,
        limit: int,
    ) -> ItemPage: ...

    # --- mutations ---

    def ensure_collection(self) -> dict: ...

    def delete_collection(self) -> None: ...

    def upsert_items(self, items: list[ItemRecord]) -> int: ...
