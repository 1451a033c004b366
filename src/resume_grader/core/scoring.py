"""
Scoring engine.

Pure, deterministic reduction of the merged verdicts into a total
penalty, a normalized score, a grade and the top actionable fixes.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from resume_grader.models.evaluation import (
    FALLBACK_OVERVIEW,
    EvaluationSummary,
    Grade,
)
from resume_grader.models.rubric import MAX_POSSIBLE_PENALTY
from resume_grader.models.verdict import RuleVerdict

# Lower bound of each grade band, evaluated high to low.
GRADE_THRESHOLDS: tuple[tuple[float, Grade], ...] = (
    (90, Grade.EXCELLENT),
    (75, Grade.STRONG),
    (60, Grade.FAIR),
    (40, Grade.WEAK),
)
TOP_FIX_COUNT = 3

_ONE_DECIMAL = Decimal("0.1")


def apply_weights(verdicts: Sequence[RuleVerdict]) -> list[RuleVerdict]:
	"""Return copies with ``weighted_penalty = penalty * weight``."""
	return [
	    v.model_copy(update={"weighted_penalty": v.penalty * v.weight})
	    for v in verdicts
	]


def total_weighted_penalty(verdicts: Sequence[RuleVerdict]) -> int:
	"""Sum of locally recomputed weighted penalties."""
	return sum(v.penalty * v.weight for v in verdicts)


def compute_final_score(total_penalty: int,
                        max_penalty: int = MAX_POSSIBLE_PENALTY) -> float:
	"""
	Normalize a total penalty to a 0-100 score with one decimal.

	Uses decimal arithmetic with half-up rounding so that results do not
	depend on binary float representation.
	"""
	raw = Decimal(100) - Decimal(total_penalty) / Decimal(max_penalty) * 100
	score = raw.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
	return float(min(max(score, Decimal(0)), Decimal(100)))


def grade_for_score(score: float) -> Grade:
	"""Map a score to its grade band."""
	for threshold, grade in GRADE_THRESHOLDS:
		if score >= threshold:
			return grade
	return Grade.NEEDS_WORK


def top_fixes(verdicts: Sequence[RuleVerdict],
              limit: int = TOP_FIX_COUNT) -> list[str]:
	"""
	Suggestions of the highest weighted penalties.

	Sorting is stable, so equal penalties keep rubric order. Zero-penalty
	verdicts are eligible when fewer than ``limit`` verdicts are penalized.
	"""
	ranked = sorted(verdicts,
	                key=lambda v: v.penalty * v.weight,
	                reverse=True)
	return [v.suggestion for v in ranked[:limit]]


def build_summary(
    verdicts: Sequence[RuleVerdict],
    overview: str = FALLBACK_OVERVIEW,
) -> EvaluationSummary:
	"""
	Compute the evaluation summary for a merged verdict sequence.

	Parameters:
		verdicts: All rubric verdicts in rubric order.
		overview: One-sentence qualitative summary.

	Returns:
		The immutable EvaluationSummary.
	"""
	total = total_weighted_penalty(verdicts)
	score = compute_final_score(total)
	return EvaluationSummary(
	    total_weighted_penalty=total,
	    max_possible_penalty=MAX_POSSIBLE_PENALTY,
	    final_score=score,
	    grade=grade_for_score(score),
	    overview=overview,
	    top_3_actionable_fixes=top_fixes(verdicts),
	)


__all__ = [
    "GRADE_THRESHOLDS",
    "TOP_FIX_COUNT",
    "apply_weights",
    "total_weighted_penalty",
    "compute_final_score",
    "grade_for_score",
    "top_fixes",
    "build_summary",
]
