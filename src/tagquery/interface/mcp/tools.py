"""Tool registry for the tag search MCP server.

Strict JSON schemas via Pydantic; criteria validated at the boundary before
anything is compiled.
"""

from __future__ import annotations

import json
import time

from pydantic import ValidationError

from ...domain.compiler import compile_criteria
from ...domain.predicates import describe
from ...models.requests import PageRequest, SearchCriteria, SearchRequest
from ..observability import elapsed_ms, log_invocation
from ..validation import validate_criteria

ALLOWED_TOOLS = frozenset({"tags_compile", "tags_validate", "tags_search"})

_service = None


def _get_search_service():
    global _service
    if _service is None:
        from ...wiring import build_search_service
        _service = build_search_service()
    return _service


def register_tools(mcp):
    """Register tag query tools."""

    @mcp.tool()
    def tags_compile(tags: list) -> str:
        """Compile tag criteria into a CNF predicate (no query is run).

        Args:
            tags: Each entry is a signed tag id (negative = must not have) or a list of them

        Returns:
            JSON with predicate tree and a compact text form, or validation errors
        """
        t0 = time.monotonic()
        validation = validate_criteria(tags)
        if not validation.is_valid:
            log_invocation("tags_compile", None, elapsed_ms(t0), error="invalid_criteria")
            return json.dumps(validation.to_dict())
        predicate = compile_criteria(tags)
        log_invocation("tags_compile", None, elapsed_ms(t0), extra={"criteria_count": len(tags)})
        return json.dumps({
            "predicate": predicate.model_dump(mode="json"),
            "text": describe(predicate),
            "warnings": validation.warnings,
        })

    @mcp.tool()
    def tags_validate(tags: list) -> str:
        """Check tag criteria without compiling. Returns valid, errors, warnings."""
        return json.dumps(validate_criteria(tags).to_dict())

    @mcp.tool()
    def tags_search(
        tags: list | None = None,
        title: str | None = None,
        page: int = 1,
        size: int | None = None,
    ) -> str:
        """Search tagged items. Criteria are ANDed; a list entry is one clause.

        Args:
            tags: Signed tag ids or lists of them; omit for no tag filter
            title: Case-insensitive title substring
            page: 1-based page number
            size: Page size (omit for the DEFAULT_PAGE_SIZE setting)

        Returns:
            JSON with metadata (current_page, page_size, total_items, total_pages) and data
        """
        t0 = time.monotonic()
        validation = validate_criteria(tags)
        if not validation.is_valid:
            log_invocation("tags_search", None, elapsed_ms(t0), error="invalid_criteria")
            return json.dumps(validation.to_dict())
        try:
            request = SearchRequest(
                data=SearchCriteria(tags=tags, title=title),
                metadata=PageRequest(page=page, **({} if size is None else {"size": size})),
            )
        except ValidationError as e:
            log_invocation("tags_search", None, elapsed_ms(t0), error="invalid_request")
            return json.dumps({"valid": False, "errors": [err["msg"] for err in e.errors()], "warnings": []})
        response = _get_search_service().search(request)
        log_invocation(
            "tags_search",
            None,
            elapsed_ms(t0),
            extra={"total_items": response.metadata.total_items},
        )
        return response.model_dump_json(indent=2)
