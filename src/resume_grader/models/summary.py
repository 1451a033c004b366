"""
Score card data model for TUI and report rendering.

Pure data extraction for the final summary display,
separating data logic from Rich and markdown rendering.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .evaluation import EvaluationResult
from .rubric import MAX_RULE_PENALTY
from .verdict import RuleVerdict


class CategoryBreakdown(BaseModel):
	"""Verdicts of one rubric category with their penalty subtotal."""

	category: str
	rules: list[RuleVerdict] = Field(default_factory=list)
	weighted_penalty: int = 0
	max_penalty: int = 0


class UsageInfo(BaseModel):
	"""Token and cost figures for display."""

	prompt_tokens: int = 0
	completion_tokens: int = 0
	total_tokens: int = 0
	cost_usd: float = 0.0


class ScoreCardData(BaseModel):
	"""All data needed to render the final score card.

	This model is populated by `build_score_card()` and consumed by the
	TUI and the markdown renderer.
	"""

	final_score: float
	grade: str
	overview: str
	total_weighted_penalty: int
	max_possible_penalty: int
	top_fixes: list[str] = Field(default_factory=list)
	categories: list[CategoryBreakdown] = Field(default_factory=list)
	usage: UsageInfo | None = None


def build_score_card(
    result: EvaluationResult,
    show_usage: bool = False,
) -> ScoreCardData:
	"""
	Extract display data from an evaluation result.

	Categories appear in the order their first rule appears in the rubric;
	rules keep rubric order inside each category.

	Parameters:
		result: Completed evaluation.
		show_usage: Whether to include token usage.

	Returns:
		ScoreCardData ready for rendering.
	"""
	by_category: dict[str, CategoryBreakdown] = {}
	for verdict in result.rules:
		entry = by_category.setdefault(
		    verdict.category, CategoryBreakdown(category=verdict.category))
		entry.rules.append(verdict)
		entry.weighted_penalty += verdict.weighted_penalty
		entry.max_penalty += verdict.weight * MAX_RULE_PENALTY

	summary = result.summary
	usage = None
	if show_usage:
		usage = UsageInfo(
		    prompt_tokens=result.usage.prompt_tokens,
		    completion_tokens=result.usage.completion_tokens,
		    total_tokens=result.usage.total_tokens,
		    cost_usd=result.cost_usd,
		)
	return ScoreCardData(
	    final_score=summary.final_score,
	    grade=str(summary.grade),
	    overview=summary.overview,
	    total_weighted_penalty=summary.total_weighted_penalty,
	    max_possible_penalty=summary.max_possible_penalty,
	    top_fixes=list(summary.top_3_actionable_fixes),
	    categories=list(by_category.values()),
	    usage=usage,
	)


__all__ = [
    "CategoryBreakdown",
    "UsageInfo",
    "ScoreCardData",
    "build_score_card",
]
