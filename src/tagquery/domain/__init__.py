"""Domain layer for tag queries."""

from .compiler import TagCriteriaCompiler, compile_criteria
from .criteria import (
    ClassifiedCriterion,
    ClauseKind,
    CriteriaSet,
    Exclude,
    Include,
    TagCriterion,
    TagId,
    classify,
    requirement_from_signed,
    requirements_of,
)
from .predicates import TRIVIALLY_TRUE, And, Or, Overlaps, Predicate, PredicateAdapter, describe
from .search_semantics import (
    RULE_CNF_AND,
    RULE_EMPTY_OVERLAP_FALSE,
    RULE_GROUP_SIMPLE,
    RULE_MIXED_GROUP_OR,
    RULE_NO_TAGS_NO_FILTER,
    RULE_SCALAR_SIGN,
    RULE_ZERO_IS_INCLUSION,
)

__all__ = [
    "And",
    "ClassifiedCriterion",
    "ClauseKind",
    "CriteriaSet",
    "Exclude",
    "Include",
    "Or",
    "Overlaps",
    "Predicate",
    "PredicateAdapter",
    "TRIVIALLY_TRUE",
    "TagCriteriaCompiler",
    "TagCriterion",
    "TagId",
    "classify",
    "compile_criteria",
    "describe",
    "requirement_from_signed",
    "requirements_of",
    "RULE_CNF_AND",
    "RULE_EMPTY_OVERLAP_FALSE",
    "RULE_GROUP_SIMPLE",
    "RULE_MIXED_GROUP_OR",
    "RULE_NO_TAGS_NO_FILTER",
    "RULE_SCALAR_SIGN",
    "RULE_ZERO_IS_INCLUSION",
]
