"""
Resume Grader models.

This subpackage contains Pydantic models for configuration, the rubric,
rule verdicts, token usage and evaluation results.

Key models:
    - Config: Application configuration loaded from environment
    - RunParams: Parameters for a CLI run
    - RuleDefinition / RubricGroup: Static rubric and its partitions
    - RuleVerdict: Validated per-rule outcome from the reasoning service
    - EvaluationResult: Terminal artifact returned to callers
"""

from .usage import TokenUsage, aggregate
from .config import Config, load_env
from .run_params import RunParams
from .rubric import (
    RuleDefinition,
    RubricGroup,
    RUBRIC_SIZE,
    MAX_RULE_PENALTY,
    MAX_POSSIBLE_PENALTY,
)
from .verdict import RuleVerdict, TRIGGER_NOT_FOUND
from .evaluation import (
    Grade,
    GroupResult,
    EvaluationSummary,
    EvaluationResult,
    FALLBACK_OVERVIEW,
)
from .request import EvaluationRequest
from .summary import (
    CategoryBreakdown,
    UsageInfo,
    ScoreCardData,
    build_score_card,
)

__all__ = [
    "TokenUsage",
    "aggregate",
    "Config",
    "load_env",
    "RunParams",
    "RuleDefinition",
    "RubricGroup",
    "RUBRIC_SIZE",
    "MAX_RULE_PENALTY",
    "MAX_POSSIBLE_PENALTY",
    "RuleVerdict",
    "TRIGGER_NOT_FOUND",
    "Grade",
    "GroupResult",
    "EvaluationSummary",
    "EvaluationResult",
    "FALLBACK_OVERVIEW",
    "EvaluationRequest",
    "CategoryBreakdown",
    "UsageInfo",
    "ScoreCardData",
    "build_score_card",
]
