"""Tag criteria: signed ids classified into typed requirements.

A criterion is either a single signed tag id (scalar) or a list of signed
tag ids (group). Non-negative ids require the tag, negative ids forbid the
tag whose id is the magnitude. The sign is read exactly once, here.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

TagId = int
TagCriterion = Union[TagId, list[TagId]]
CriteriaSet = Sequence[TagCriterion]


class Include(BaseModel):
    """The item must carry ``tag_id``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["include"] = "include"
    tag_id: TagId = Field(..., ge=0)


class Exclude(BaseModel):
    """The item must not carry ``tag_id``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["exclude"] = "exclude"
    tag_id: TagId = Field(..., gt=0)


TagRequirement = Annotated[Union[Include, Exclude], Field(discriminator="kind")]


class ClauseKind(str, Enum):
    """Shape of the clause a criterion compiles to."""

    simple = "simple"     # one of must_have / must_not is empty
    complex = "complex"   # both are non-empty


class ClassifiedCriterion(BaseModel):
    """Unsigned ids split by polarity."""

    model_config = ConfigDict(frozen=True)

    must_have: frozenset[TagId] = frozenset()
    must_not: frozenset[TagId] = frozenset()

    @property
    def kind(self) -> ClauseKind:
        if self.must_have and self.must_not:
            return ClauseKind.complex
        return ClauseKind.simple


def requirement_from_signed(value: TagId) -> Include | Exclude:
    if value >= 0:
        return Include(tag_id=value)
    return Exclude(tag_id=-value)


def requirements_of(criterion: TagCriterion) -> tuple[Include | Exclude, ...]:
    """Expand a scalar or group criterion into requirements, in input order."""
    if isinstance(criterion, (list, tuple)):
        return tuple(requirement_from_signed(value) for value in criterion)
    return (requirement_from_signed(criterion),)


def classify(criterion: TagCriterion) -> ClassifiedCriterion:
    requirements = requirements_of(criterion)
    return ClassifiedCriterion(
        must_have=frozenset(r.tag_id for r in requirements if isinstance(r, Include)),
        must_not=frozenset(r.tag_id for r in requirements if isinstance(r, Exclude)),
    )
