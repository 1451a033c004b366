"""
Overview synthesizer.

Makes one extra reasoning-service call over the full verdict set to get
a one-sentence summary. The step is advisory: every failure falls back
to a fixed sentence instead of failing the evaluation.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Sequence
from typing import Optional

from resume_grader.core.evaluator import build_messages, response_content
from resume_grader.models.config import Config
from resume_grader.models.evaluation import FALLBACK_OVERVIEW
from resume_grader.models.usage import TokenUsage
from resume_grader.models.verdict import RuleVerdict
from resume_grader.ui.progress import OVERVIEW_SOURCE, ProgressCallback, notify
from resume_grader.utils.logging import get_logger
from resume_grader.utils.parsing import strip_code_fences, strip_wrapping_quotes
from resume_grader.utils.protocols import ChatClientProtocol

logger = get_logger(__name__)

OVERVIEW_SYSTEM_MESSAGE = (
    "You are a strict resume evaluator. Given {count} rule objects with "
    "penalties and notes, generate a 1-sentence summary of resume quality. "
    "Be objective, specific, and use professional tone.")


def build_overview_prompt(verdicts: Sequence[RuleVerdict]) -> str:
	"""Serialize the verdicts into the overview request."""
	payload = json.dumps([v.model_dump() for v in verdicts],
	                     indent=2,
	                     ensure_ascii=False)
	return (f"Here are the rule evaluations:\n{payload}\n\n"
	        "Return only the 1-sentence summary. No formatting.")


def extract_overview(content: str | None) -> str | None:
	"""
	Clean the overview message content.

	Removes code fences, unwraps a JSON string (or an object with an
	``overview`` key) and strips surrounding quotes.

	Returns:
		The sentence, or None when nothing usable remains.
	"""
	if not content:
		return None
	text = strip_code_fences(content)
	try:
		decoded = json.loads(text)
	except ValueError:
		decoded = None
	if isinstance(decoded, str):
		text = decoded
	elif isinstance(decoded, dict) and isinstance(decoded.get("overview"),
	                                              str):
		text = decoded["overview"]
	elif decoded is not None:
		return None
	text = " ".join(strip_wrapping_quotes(text).split())
	return text or None


async def synthesize_overview(
    client: ChatClientProtocol,
    config: Config,
    verdicts: Sequence[RuleVerdict],
    progress_cb: Optional[ProgressCallback] = None,
) -> tuple[str, TokenUsage]:
	"""
	Produce a one-sentence overview of the evaluation.

	No retries. Errors, timeouts and empty content yield
	FALLBACK_OVERVIEW.

	Returns:
		Tuple of (overview sentence, token usage of the call).
	"""
	notify(progress_cb, OVERVIEW_SOURCE, "overview_started")
	messages = build_messages(
	    OVERVIEW_SYSTEM_MESSAGE.format(count=len(verdicts)),
	    build_overview_prompt(verdicts),
	)
	try:
		response = await asyncio.wait_for(
		    client.chat.completions.create(
		        model=config.model,
		        messages=messages,
		        temperature=config.overview_temperature,
		    ),
		    timeout=config.overview_timeout_seconds,
		)
	except Exception as exc:
		logger.warning("overview call failed, using fallback: %s",
		               str(exc) or type(exc).__name__)
		notify(progress_cb, OVERVIEW_SOURCE, "overview_fallback")
		return FALLBACK_OVERVIEW, TokenUsage()

	usage = TokenUsage.from_response(response)
	overview = extract_overview(response_content(response))
	if not overview:
		logger.warning("overview response empty or unusable, using fallback")
		notify(progress_cb, OVERVIEW_SOURCE, "overview_fallback")
		return FALLBACK_OVERVIEW, usage
	notify(progress_cb, OVERVIEW_SOURCE, "overview_completed")
	return overview, usage


__all__ = [
    "OVERVIEW_SYSTEM_MESSAGE",
    "build_overview_prompt",
    "extract_overview",
    "synthesize_overview",
]
