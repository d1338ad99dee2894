"""Tag search semantics."""

# Rule names for reference in tests and audit
RULE_SCALAR_SIGN = "scalar: id >= 0 requires the tag, id < 0 forbids tag -id"
RULE_ZERO_IS_INCLUSION = "zero: tag id 0 is a valid inclusion id"
RULE_GROUP_SIMPLE = "group: single-polarity group overlaps its ids (ANY)"
RULE_MIXED_GROUP_OR = "mixed group: has ANY of included OR has NONE of excluded"
RULE_CNF_AND = "criteria: one clause per criterion, clauses combined with AND"
RULE_EMPTY_OVERLAP_FALSE = "empty set: overlap with no ids is false, so a not-overlap clause always holds"
RULE_NO_TAGS_NO_FILTER = "no tags key: compiler not invoked, no tag filter applied"
