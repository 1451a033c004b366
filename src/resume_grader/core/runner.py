"""
Main orchestrator for resume evaluation.

Validates the request, grades all rubric groups concurrently, computes
the deterministic score and attaches the overview sentence.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import Any, Optional

from resume_grader.core.coordinator import evaluate_groups
from resume_grader.core.overview import synthesize_overview
from resume_grader.core.partition import partition_rubric
from resume_grader.core.scoring import apply_weights, build_summary
from resume_grader.llm_client import close_client, create_client
from resume_grader.loaders.rubric import (
    default_rubric,
    load_rubric,
    validate_rubric,
)
from resume_grader.models.config import Config
from resume_grader.models.evaluation import EvaluationResult
from resume_grader.models.request import EvaluationRequest
from resume_grader.models.rubric import RuleDefinition
from resume_grader.models.usage import aggregate
from resume_grader.ui.progress import ProgressCallback
from resume_grader.utils.logging import get_logger
from resume_grader.utils.protocols import ChatClientProtocol

logger = get_logger(__name__)


def resolve_rubric(
    config: Config,
    rubric: Optional[Sequence[RuleDefinition]] = None,
) -> tuple[RuleDefinition, ...]:
	"""
	Return the explicit rubric, the configured file, or the bundled one.

	An explicit rubric gets the same checks as a rubric file.

	Raises:
		RubricConfigError: If the rubric breaks the rubric contract.
	"""
	if rubric is not None:
		rules = tuple(rubric)
		validate_rubric(rules, "rubric argument")
		return rules
	if config.rubric_file:
		return load_rubric(config.rubric_file)
	return default_rubric()


async def evaluate_resume(
    config: Config,
    resume_text: Any,
    *,
    client: Optional[ChatClientProtocol] = None,
    rubric: Optional[Sequence[RuleDefinition]] = None,
    progress_cb: Optional[ProgressCallback] = None,
) -> EvaluationResult:
	"""
	Evaluate one resume against the full rubric.

	Input is validated before any reasoning-service call. When no client
	is supplied one is created from ``config`` and closed afterwards.

	Parameters:
		config: Application configuration.
		resume_text: Resume text to grade.
		client: Optional pre-built reasoning-service client.
		rubric: Optional rule definitions overriding the configured rubric.
		progress_cb: Optional progress callback.

	Returns:
		EvaluationResult with verdicts in rubric order and the summary.

	Raises:
		InputValidationError: If the resume text is missing or blank.
		RubricConfigError: If the rubric cannot be loaded or partitioned.
		ConfigurationError: If a client must be created without an API key.
		GroupExhaustedError: If any group fails all attempts.
		MergeIntegrityError: If the merged verdict count is wrong.
	"""
	request = EvaluationRequest.parse({"resumeText": resume_text})
	groups = partition_rubric(resolve_rubric(config, rubric))

	owns_client = client is None
	active = client if client is not None else create_client(config)
	started = time.monotonic()
	logger.info("evaluation start model=%s groups=%d chars=%d", config.model,
	            len(groups), len(request.resume_text))
	try:
		verdicts, group_usage = await evaluate_groups(
		    active,
		    config,
		    groups,
		    request.resume_text,
		    progress_cb,
		)
		weighted = apply_weights(verdicts)
		overview, overview_usage = await synthesize_overview(
		    active, config, weighted, progress_cb)
	finally:
		if owns_client:
			await close_client(active)

	usage = aggregate([group_usage, overview_usage])
	summary = build_summary(weighted, overview)
	cost = usage.cost(config.prompt_price_per_1k,
	                  config.completion_price_per_1k)
	logger.info(
	    "evaluation completed score=%.1f grade=%s tokens=%d elapsed=%.2fs",
	    summary.final_score,
	    summary.grade,
	    usage.total_tokens,
	    time.monotonic() - started,
	)
	return EvaluationResult(
	    rules=weighted,
	    summary=summary,
	    usage=usage,
	    cost_usd=cost,
	)


async def evaluate_request(config: Config, payload: Any,
                           **kwargs: Any) -> EvaluationResult:
	"""Evaluate a raw ``{"resumeText": ...}`` payload."""
	request = EvaluationRequest.parse(payload)
	return await evaluate_resume(config, request.resume_text, **kwargs)


__all__ = ["resolve_rubric", "evaluate_resume", "evaluate_request"]
