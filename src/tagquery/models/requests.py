"""Request DTOs for tag search."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, StrictInt

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


class SearchCriteria(BaseModel):
    """Filter criteria supplied by the caller."""

    tags: list[Union[StrictInt, list[StrictInt]]] | None = Field(
        default=None,
        description="CNF tag criteria: each entry is a signed tag id or a list of them",
    )
    title: str | None = Field(
        default=None,
        description="Case-insensitive title substring",
    )


class PageRequest(BaseModel):
    """Requested page; missing keys fall back to page 1 of size 10."""

    page: int = Field(default=DEFAULT_PAGE, ge=1, description="1-based page number")
    size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=1000, description="Items per page")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


class SearchRequest(BaseModel):
    """Input DTO for the tag search."""

    data: SearchCriteria | None = Field(
        default=None,
        description="Tag/title criteria; absent means no filter",
    )
    metadata: PageRequest = Field(
        default_factory=PageRequest,
        description="Pagination",
    )

    @property
    def has_tag_criteria(self) -> bool:
        return self.data is not None and self.data.tags is not None

    @property
    def title(self) -> str | None:
        return self.data.title if self.data is not None else None
