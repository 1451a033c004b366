"""
Rubric models.

Defines the static rule definitions that make up the scoring rubric and
the contiguous groups the rubric is partitioned into for grading.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Number of rules in the canonical rubric.
RUBRIC_SIZE = 28
# Highest penalty a single rule can receive.
MAX_RULE_PENALTY = 10
# Sum of weight * MAX_RULE_PENALTY over the canonical rubric. Part of the
# scoring contract; never recomputed from live data.
MAX_POSSIBLE_PENALTY = 820


class RuleDefinition(BaseModel):
	"""One immutable rubric rule."""

	model_config = ConfigDict(frozen=True)

	rule: str = Field(min_length=1, description="Rule identifier")
	category: str = Field(min_length=1, description="Rubric category")
	weight: int = Field(gt=0, description="Multiplier applied to penalty")
	evaluation_guideline: str = Field(
	    description="How the reasoning service should assign a penalty")


class RubricGroup(BaseModel):
	"""A contiguous rubric slice graded in a single reasoning-service call."""

	model_config = ConfigDict(frozen=True)

	index: int = Field(ge=0, description="Position in partition order")
	name: str
	rules: tuple[RuleDefinition, ...]

	@property
	def size(self) -> int:
		return len(self.rules)

	def find(self, rule_name: str) -> RuleDefinition | None:
		"""Return the definition whose name matches, ignoring case."""
		key = rule_name.strip().casefold()
		for definition in self.rules:
			if definition.rule.casefold() == key:
				return definition
		return None


__all__ = [
    "RuleDefinition",
    "RubricGroup",
    "RUBRIC_SIZE",
    "MAX_RULE_PENALTY",
    "MAX_POSSIBLE_PENALTY",
]
