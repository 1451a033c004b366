"""Core business logic for resume evaluation.

This subpackage contains the orchestration, group evaluation and scoring
logic.

Key modules:
    - runner: Main orchestration via evaluate_resume()
    - coordinator: Concurrent group evaluation and merge
    - evaluator: Single-group evaluation with bounded retries
    - scoring: Deterministic score, grade and top fixes
    - overview: One-sentence overview with fallback
"""

from resume_grader.core.runner import evaluate_resume, evaluate_request
from resume_grader.core.coordinator import evaluate_groups, merge_group_results
from resume_grader.core.evaluator import evaluate_group, parse_group_response
from resume_grader.core.partition import RUBRIC_GROUPS, partition_rubric
from resume_grader.core.prompt_builder import build_group_prompt
from resume_grader.core.scoring import (
    apply_weights,
    build_summary,
    compute_final_score,
    grade_for_score,
    top_fixes,
)
from resume_grader.core.overview import synthesize_overview

__all__ = [
    # runner
    "evaluate_resume",
    "evaluate_request",
    # coordinator
    "evaluate_groups",
    "merge_group_results",
    # evaluator
    "evaluate_group",
    "parse_group_response",
    # partition
    "RUBRIC_GROUPS",
    "partition_rubric",
    # prompts
    "build_group_prompt",
    # scoring
    "apply_weights",
    "build_summary",
    "compute_final_score",
    "grade_for_score",
    "top_fixes",
    # overview
    "synthesize_overview",
]
