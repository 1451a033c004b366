"""
Evaluation result models.

Defines the per-group intermediate result, the derived score summary and
the terminal artifact returned to callers.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .rubric import MAX_POSSIBLE_PENALTY
from .usage import TokenUsage
from .verdict import RuleVerdict

# Overview used when the synthesis call fails or returns nothing.
FALLBACK_OVERVIEW = "Evaluation complete based on 28-point rubric."


class Grade(str, Enum):
	"""
	Letter grade bands, highest first.

	EXCELLENT: score >= 90.
	STRONG: 75 <= score < 90.
	FAIR: 60 <= score < 75.
	WEAK: 40 <= score < 60.
	NEEDS_WORK: score < 40.
	"""

	EXCELLENT = "Excellent"
	STRONG = "Strong"
	FAIR = "Fair"
	WEAK = "Weak"
	NEEDS_WORK = "Needs Work"


class GroupResult(BaseModel):
	"""Verdicts and usage produced by one group evaluation."""

	group: str
	verdicts: list[RuleVerdict]
	usage: TokenUsage = Field(default_factory=TokenUsage)
	attempts: int = Field(1, ge=1, description="Attempts consumed")


class EvaluationSummary(BaseModel):
	"""Score, grade and advice derived from the merged verdicts."""

	model_config = ConfigDict(frozen=True, use_enum_values=True)

	total_weighted_penalty: int = Field(ge=0)
	max_possible_penalty: int = MAX_POSSIBLE_PENALTY
	final_score: float = Field(ge=0, le=100)
	grade: Grade
	overview: str = FALLBACK_OVERVIEW
	top_3_actionable_fixes: list[str] = Field(default_factory=list,
	                                          max_length=3)


class EvaluationResult(BaseModel):
	"""Terminal artifact of one resume evaluation."""

	rules: list[RuleVerdict] = Field(description="Verdicts in rubric order")
	summary: EvaluationSummary
	usage: TokenUsage = Field(
	    default_factory=TokenUsage,
	    description="Token totals across every reasoning-service call",
	)
	cost_usd: float = Field(0.0, description="Estimated spend in USD")


__all__ = [
    "Grade",
    "GroupResult",
    "EvaluationSummary",
    "EvaluationResult",
    "FALLBACK_OVERVIEW",
]
