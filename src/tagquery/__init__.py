"""Tag-criteria query compiler and search service."""

from .domain import And, Or, Overlaps, TagCriteriaCompiler, compile_criteria
from .models import SearchCriteria, SearchRequest, SearchResponse

__version__ = "0.1.0"
__all__ = [
    "And",
    "Or",
    "Overlaps",
    "SearchCriteria",
    "SearchRequest",
    "SearchResponse",
    "TagCriteriaCompiler",
    "compile_criteria",
]
