"""MCP server exposes exactly the tag tools, and they shape responses as JSON."""

import asyncio
import json

import pytest

from tagquery.adapters.memory_item_store import MemoryItemStore
from tagquery.interface.mcp import tools as tools_module
from tagquery.interface.mcp.server import create_server
from tagquery.interface.mcp.tools import ALLOWED_TOOLS
from tagquery.ports.item_store import ItemRecord
from tagquery.services.search_service import SearchService


def _get_tools(server) -> dict:
    """Extract registered tools from a FastMCP server."""
    # FastMCP stores tools in _tool_manager._tools dict
    return server._tool_manager._tools


def _call(server, name, **kwargs) -> dict:
    return json.loads(_get_tools(server)[name].fn(**kwargs))


def _call_through_server(server, name, arguments: dict) -> dict:
    """Invoke a tool the way an MCP client does, including argument parsing."""
    result = asyncio.run(server.call_tool(name, arguments))
    if isinstance(result, tuple):
        result = result[0]
    return json.loads(result[0].text)


@pytest.fixture
def memory_service(monkeypatch):
    store = MemoryItemStore([
        ItemRecord(item_id=1, title="Sorting", tag_ids=[1, 3]),
        ItemRecord(item_id=2, title="Graphs", tag_ids=[3, 7]),
    ])
    service = SearchService(store)
    monkeypatch.setattr(tools_module, "_service", service)
    return service


def test_server_exposes_only_tag_tools():
    assert set(_get_tools(create_server()).keys()) == ALLOWED_TOOLS


def test_compile_tool_returns_tree_and_text():
    out = _call(create_server(), "tags_compile", tags=[5, [3, -7]])
    assert out["text"] == "AND(OVERLAPS{5}, OR(OVERLAPS{3}, NOT OVERLAPS{7}))"
    assert out["predicate"]["kind"] == "and"
    assert out["warnings"] == []


def test_compile_tool_rejects_invalid_criteria():
    out = _call(create_server(), "tags_compile", tags=[["x"]])
    assert out["valid"] is False
    assert out["errors"]


def test_validate_tool():
    out = _call(create_server(), "tags_validate", tags=[[0, -3]])
    assert out["valid"] is True
    assert out["warnings"]


def test_search_tool(memory_service):
    out = _call(create_server(), "tags_search", tags=[3, -7], page=1, size=10)
    assert out["metadata"] == {"current_page": 1, "page_size": 10, "total_items": 1, "total_pages": 1}
    assert [item["item_id"] for item in out["data"]] == [1]


def test_search_tool_without_tags(memory_service):
    out = _call(create_server(), "tags_search", title="graph", size=10)
    assert [item["item_id"] for item in out["data"]] == [2]


def test_search_tool_rejects_bad_page(memory_service):
    out = _call(create_server(), "tags_search", tags=[1], page=0, size=10)
    assert out["valid"] is False


@pytest.mark.parametrize("tags", [["5"], [[True, -7]], ["5", [True, -7]], [1.0]])
def test_compile_tool_rejects_coercible_entries_through_server(tags):
    out = _call_through_server(create_server(), "tags_compile", {"tags": tags})
    assert out["valid"] is False
    assert out["errors"]
    assert "predicate" not in out


def test_compile_and_validate_tools_agree():
    server = create_server()
    payload = {"tags": ["5", [True, -7]]}
    compiled = _call_through_server(server, "tags_compile", payload)
    validated = _call_through_server(server, "tags_validate", payload)
    assert compiled == validated


def test_search_tool_rejects_coercible_entries_through_server(memory_service):
    out = _call_through_server(create_server(), "tags_search", {"tags": [True]})
    assert out["valid"] is False


def test_compile_tool_through_server_accepts_valid_criteria():
    out = _call_through_server(create_server(), "tags_compile", {"tags": [5, [3, -7]]})
    assert out["text"] == "AND(OVERLAPS{5}, OR(OVERLAPS{3}, NOT OVERLAPS{7}))"


def test_search_tool_rejects_zero_size(memory_service):
    out = _call(create_server(), "tags_search", tags=[1], size=0)
    assert out["valid"] is False


def test_search_tool_omitted_size_uses_service_default(monkeypatch):
    store = MemoryItemStore([ItemRecord(item_id=i, tag_ids=[1]) for i in range(1, 6)])
    monkeypatch.setattr(tools_module, "_service", SearchService(store, default_page_size=2))
    out = _call(create_server(), "tags_search", tags=[1])
    assert out["metadata"]["page_size"] == 2
    assert out["metadata"]["total_pages"] == 3
    assert [item["item_id"] for item in out["data"]] == [1, 2]
