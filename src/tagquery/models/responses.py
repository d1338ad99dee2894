"""Response DTOs for tag search."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from ..ports.item_store import ItemRecord


class PageInfo(BaseModel):
    """Pagination summary returned with every search."""

    current_page: int = Field(..., ge=1, description="Page that was requested")
    page_size: int = Field(..., ge=1, description="Items per page")
    total_items: int = Field(..., ge=0, description="Items matching the filter")
    total_pages: int = Field(..., ge=0, description="ceil(total_items / page_size)")

    @classmethod
    def build(cls, page: int, size: int, total_items: int) -> PageInfo:
        return cls(
            current_page=page,
            page_size=size,
            total_items=total_items,
            total_pages=math.ceil(total_items / size),
        )


class SearchResponse(BaseModel):
    """Output DTO for the tag search."""

    metadata: PageInfo
    data: list[ItemRecord] = Field(default_factory=list, description="Items on this page")
