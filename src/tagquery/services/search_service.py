"""SearchService: compiles tag criteria and runs them against an item store."""

from __future__ import annotations

import time
import uuid
from typing import Any

from ..domain.compiler import TagCriteriaCompiler
from ..domain.predicates import And, Or, Overlaps
from ..models.requests import DEFAULT_PAGE_SIZE, SearchRequest
from ..models.responses import PageInfo, SearchResponse
from ..ports.item_store import ItemStorePort


class SearchService:
    """Orchestrates criteria compilation, pagination and store execution."""

    def __init__(
        self,
        item_store: ItemStorePort,
        compiler: TagCriteriaCompiler | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = 100,
        logger: Any = None,
    ) -> None:
        self._store = item_store
        self._compiler = compiler or TagCriteriaCompiler()
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size
        self._logger = logger

    def build_filter(self, request: SearchRequest) -> Overlaps | And | Or | None:
        """Return the tag predicate, or None when the request carries no ``tags`` key."""
        if not request.has_tag_criteria:
            return None
        return self._compiler.compile(request.data.tags)

    def search(self, request: SearchRequest) -> SearchResponse:
        trace_id = str(uuid.uuid4())
        t0 = time.monotonic()
        page = request.metadata.page
        size = min(self._page_size(request), self._max_page_size)

        predicate = self.build_filter(request)
        if self._logger:
            self._logger.debug(
                "search_filter",
                extra={
                    "trace_id": trace_id,
                    "criteria_count": len(request.data.tags) if request.has_tag_criteria else 0,
                    "has_title": bool(request.title),
                },
            )

        result = self._store.find(
            predicate=predicate,
            title=request.title,
            offset=(page - 1) * size,
            limit=size,
        )

        if self._logger:
            self._logger.info(
                "search",
                extra={
                    "trace_id": trace_id,
                    "page": page,
                    "size": size,
                    "total_items": result.total,
                    "latency_ms": round((time.monotonic() - t0) * 1000, 2),
                },
            )

        return SearchResponse(
            metadata=PageInfo.build(page=page, size=size, total_items=result.total),
            data=result.items,
        )

    def _page_size(self, request: SearchRequest) -> int:
        # A request that never set size takes the service default.
        if "size" in request.metadata.model_fields_set:
            return request.metadata.size
        return self._default_page_size
