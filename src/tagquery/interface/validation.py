"""Boundary validation for raw tag criteria.

The compiler accepts any sequence of signed ints or lists of signed ints and
never fails. Everything else is rejected here, before a request is built.
"""

from __future__ import annotations

from typing import Any


class ValidationResult:
    """Result of criteria validation."""

    def __init__(self, is_valid: bool, errors: list[str] | None = None, warnings: list[str] | None = None):
        self.is_valid = is_valid
        self.errors = errors or []
        self.warnings = warnings or []

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON response."""
        return {
            "valid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
        }

    def add_error(self, error: str) -> ValidationResult:
        """Add an error and return self for chaining."""
        self.errors.append(error)
        self.is_valid = False
        return self

    def add_warning(self, warning: str) -> ValidationResult:
        """Add a warning and return self for chaining."""
        self.warnings.append(warning)
        return self


def _is_tag_id(value: Any) -> bool:
    # bool is an int subclass but never a tag id
    return isinstance(value, int) and not isinstance(value, bool)


def validate_criteria(tags: Any) -> ValidationResult:
    """Validate raw ``tags`` criteria as received from a caller.

    ``None`` is valid and means "no tag filter".

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult(is_valid=True)
    if tags is None:
        return result
    if not isinstance(tags, list):
        return result.add_error(f"tags must be a list, got {type(tags).__name__}")
    if not tags:
        result.add_warning("tags is an empty list; no tag filter will apply")

    for i, criterion in enumerate(tags):
        if _is_tag_id(criterion):
            continue
        if not isinstance(criterion, list):
            result.add_error(
                f"tags[{i}] must be an integer or a list of integers, got {type(criterion).__name__}"
            )
            continue
        _validate_group(i, criterion, result)

    return result


def _validate_group(index: int, group: list[Any], result: ValidationResult) -> None:
    if not group:
        result.add_warning(f"tags[{index}] is an empty group; it matches every item")
        return
    bad = [v for v in group if not _is_tag_id(v)]
    if bad:
        result.add_error(f"tags[{index}] contains non-integer entries: {bad!r}")
        return
    if 0 in group and any(v < 0 for v in group):
        result.add_warning(
            f"tags[{index}] mixes tag 0 with exclusions; 0 is read as an inclusion of tag 0"
        )
    if len(set(group)) != len(group):
        result.add_warning(f"tags[{index}] has duplicate ids; duplicates are ignored")
    magnitudes = {abs(v) for v in group if v != 0}
    if any(v > 0 and -v in group for v in group):
        result.add_warning(
            f"tags[{index}] both requires and forbids the same tag; the clause always holds"
        )
    if len(magnitudes) > 1000:
        result.add_warning(f"tags[{index}] has {len(magnitudes)} distinct ids; query may be slow")
