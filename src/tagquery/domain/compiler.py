"""TagCriteriaCompiler: builds a CNF predicate from tag criteria."""

from __future__ import annotations

from .criteria import ClassifiedCriterion, ClauseKind, CriteriaSet, TagCriterion, classify
from .predicates import And, Or, Overlaps


class TagCriteriaCompiler:
    """Translate a criteria set into ``And(one predicate per criterion)``.

    Stateless: a single instance may be shared across threads.
    """

    def compile(self, criteria: CriteriaSet) -> And:
        return And(children=tuple(self.compile_criterion(c) for c in criteria))

    def compile_criterion(self, criterion: TagCriterion) -> Overlaps | Or:
        clause = classify(criterion)
        match clause.kind:
            case ClauseKind.simple:
                return self._simple_clause(clause)
            case ClauseKind.complex:
                return self._complex_clause(clause)
        raise ValueError(f"Unsupported clause kind: {clause.kind!r}")

    @staticmethod
    def _simple_clause(clause: ClassifiedCriterion) -> Overlaps:
        # Both sets empty falls through to must_overlap=False, which every item satisfies.
        if clause.must_have:
            return Overlaps(ids=clause.must_have, must_overlap=True)
        return Overlaps(ids=clause.must_not, must_overlap=False)

    @staticmethod
    def _complex_clause(clause: ClassifiedCriterion) -> Or:
        return Or(
            children=(
                Overlaps(ids=clause.must_have, must_overlap=True),
                Overlaps(ids=clause.must_not, must_overlap=False),
            )
        )


_DEFAULT_COMPILER = TagCriteriaCompiler()


def compile_criteria(criteria: CriteriaSet) -> And:
    """Compile with the shared default compiler."""
    return _DEFAULT_COMPILER.compile(criteria)
