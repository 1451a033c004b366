"""
Rubric partitioning.

Splits the canonical rubric into the five contiguous groups that are
graded independently. Boundaries are fixed by category, not computed.
"""

from __future__ import annotations

from collections.abc import Sequence

from resume_grader.errors import RubricConfigError
from resume_grader.models.rubric import RubricGroup, RuleDefinition

# (category, rule count) in rubric order.
RUBRIC_GROUPS: tuple[tuple[str, int], ...] = (
    ("Keyword Relevance", 7),
    ("Structure", 6),
    ("Experience", 3),
    ("Writing Style", 8),
    ("Formatting", 4),
)


def partition_rubric(
        rules: Sequence[RuleDefinition]) -> tuple[RubricGroup, ...]:
	"""
	Split the rubric into ordered, non-overlapping groups.

	The concatenation of the returned groups' rules equals ``rules``.

	Parameters:
		rules: Rule definitions in canonical order.

	Returns:
		One RubricGroup per entry of RUBRIC_GROUPS.

	Raises:
		RubricConfigError: If the rule count or a slice's categories do
			not match the fixed group layout.
	"""
	expected = sum(size for _, size in RUBRIC_GROUPS)
	if len(rules) != expected:
		raise RubricConfigError(
		    f"cannot partition rubric: expected {expected} rules, "
		    f"found {len(rules)}")
	groups: list[RubricGroup] = []
	start = 0
	for index, (category, size) in enumerate(RUBRIC_GROUPS):
		chunk = tuple(rules[start:start + size])
		stray = [r.rule for r in chunk if r.category != category]
		if stray:
			raise RubricConfigError(
			    f"rules {stray} sit in the '{category}' slice but belong "
			    f"to another category")
		groups.append(RubricGroup(index=index, name=category, rules=chunk))
		start += size
	return tuple(groups)


__all__ = ["RUBRIC_GROUPS", "partition_rubric"]
