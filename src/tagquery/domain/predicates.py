"""Predicate tree handed to the execution layer.

Three node kinds: an ``Overlaps`` leaf (item tag set intersects ``ids``,
compared against ``must_overlap``) and ``And`` / ``Or`` composites.
Trees are immutable and serialise to JSON through the ``kind`` tag.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Overlaps(BaseModel):
    """Leaf: ``bool(item_tags & ids) == must_overlap``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["overlaps"] = "overlaps"
    ids: frozenset[int] = Field(default_factory=frozenset)
    must_overlap: bool = True


class And(BaseModel):
    """All children hold. No children means trivially true."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["and"] = "and"
    children: tuple[Predicate, ...] = ()


class Or(BaseModel):
    """At least one child holds."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["or"] = "or"
    children: tuple[Predicate, ...] = ()


Predicate = Annotated[Union[Overlaps, And, Or], Field(discriminator="kind")]

And.model_rebuild()
Or.model_rebuild()

PredicateAdapter: TypeAdapter[Overlaps | And | Or] = TypeAdapter(Predicate)

TRIVIALLY_TRUE = And()


def describe(predicate: Overlaps | And | Or) -> str:
    """Compact text form, e.g. ``AND(OVERLAPS{5}, NOT OVERLAPS{7})``."""
    if isinstance(predicate, Overlaps):
        ids = ",".join(str(i) for i in sorted(predicate.ids))
        prefix = "" if predicate.must_overlap else "NOT "
        return f"{prefix}OVERLAPS{{{ids}}}"
    if isinstance(predicate, And):
        return "AND(" + ", ".join(describe(c) for c in predicate.children) + ")"
    if isinstance(predicate, Or):
        return "OR(" + ", ".join(describe(c) for c in predicate.children) + ")"
    raise ValueError(f"Unsupported predicate node: {predicate!r}")
