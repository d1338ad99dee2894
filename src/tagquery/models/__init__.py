"""Search request/response models."""

from ..ports.item_store import ItemPage, ItemRecord
from .requests import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, PageRequest, SearchCriteria, SearchRequest
from .responses import PageInfo, SearchResponse

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    # Requests
    "PageRequest",
    "SearchCriteria",
    "SearchRequest",
    # Responses
    "ItemPage",
    "ItemRecord",
    "PageInfo",
    "SearchResponse",
]
