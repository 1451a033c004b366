"""
Evaluation coordinator.

Runs every rubric group concurrently and merges their verdicts back into
rubric order. The evaluation is all-or-nothing: one exhausted group fails
the whole run.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Optional

from resume_grader.core.evaluator import evaluate_group
from resume_grader.errors import MergeIntegrityError
from resume_grader.models.config import Config
from resume_grader.models.evaluation import GroupResult
from resume_grader.models.rubric import RubricGroup
from resume_grader.models.usage import TokenUsage, aggregate
from resume_grader.models.verdict import RuleVerdict
from resume_grader.ui.progress import ProgressCallback
from resume_grader.utils.logging import get_logger
from resume_grader.utils.protocols import ChatClientProtocol

logger = get_logger(__name__)


def merge_group_results(
    results: Sequence[GroupResult],
    expected_rules: Sequence[str],
) -> tuple[list[RuleVerdict], TokenUsage]:
	"""
	Concatenate group verdicts in the given order and sum their usage.

	Parameters:
		results: Group results in partition order.
		expected_rules: Rubric rule names in canonical order.

	Returns:
		Tuple of (merged verdicts, aggregated usage).

	Raises:
		MergeIntegrityError: If the merged rule names are not exactly the
			rubric's, one verdict each, in rubric order.
	"""
	verdicts = [v for res in results for v in res.verdicts]
	expected = len(expected_rules)
	if len(verdicts) != expected:
		counts = ", ".join(f"{r.group}={len(r.verdicts)}" for r in results)
		logger.error("merge integrity failure expected=%d actual=%d (%s)",
		             expected, len(verdicts), counts)
		raise MergeIntegrityError(expected, len(verdicts))
	mismatched = [
	    f"position {i}: expected '{want}', got '{v.rule}'"
	    for i, (want, v) in enumerate(zip(expected_rules, verdicts))
	    if v.rule != want
	]
	if mismatched:
		logger.error("merge integrity failure: %d rule(s) out of place",
		             len(mismatched))
		raise MergeIntegrityError(expected, len(verdicts), mismatched[0])
	return verdicts, aggregate(r.usage for r in results)


async def evaluate_groups(
    client: ChatClientProtocol,
    config: Config,
    groups: Sequence[RubricGroup],
    resume_text: str,
    progress_cb: Optional[ProgressCallback] = None,
) -> tuple[list[RuleVerdict], TokenUsage]:
	"""
	Evaluate all groups concurrently and merge the results.

	All group tasks are allowed to settle. If any failed, the usage spent
	by the successful ones is logged and the first failure in group order
	is raised; no partial result is produced.

	Parameters:
		client: Reasoning-service client shared by all groups.
		config: Application configuration.
		groups: Rubric groups in partition order.
		resume_text: Resume text.
		progress_cb: Optional progress callback.

	Returns:
		Tuple of (verdicts in rubric order, aggregated usage).
	"""
	outcomes = await asyncio.gather(
	    *(evaluate_group(client, config, g, resume_text, progress_cb)
	      for g in groups),
	    return_exceptions=True,
	)
	failures = [(g, o) for g, o in zip(groups, outcomes)
	            if isinstance(o, BaseException)]
	if failures:
		succeeded = [o for o in outcomes if isinstance(o, GroupResult)]
		if succeeded:
			spent = aggregate(r.usage for r in succeeded)
			logger.warning(
			    "discarding %d completed group(s) after failure; "
			    "tokens spent prompt=%d completion=%d total=%d",
			    len(succeeded),
			    spent.prompt_tokens,
			    spent.completion_tokens,
			    spent.total_tokens,
			)
		group, exc = failures[0]
		logger.error("evaluation aborted: %d group(s) failed, first=%s",
		             len(failures), group.name)
		raise exc

	results = [o for o in outcomes if isinstance(o, GroupResult)]
	return merge_group_results(
	    results, [r.rule for g in groups for r in g.rules])


__all__ = ["merge_group_results", "evaluate_groups"]
