"""
Group evaluator.

Sends one rubric group's prompt to the reasoning service, validates the
returned verdict array and retries failed attempts up to a fixed bound.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from pydantic import ValidationError

from resume_grader.core.prompt_builder import build_group_prompt
from resume_grader.errors import (
    GroupExhaustedError,
    MalformedResponseError,
    excerpt,
)
from resume_grader.models.config import Config
from resume_grader.models.evaluation import GroupResult
from resume_grader.models.rubric import RubricGroup
from resume_grader.models.usage import TokenUsage
from resume_grader.models.verdict import RuleVerdict
from resume_grader.ui.progress import ProgressCallback, notify
from resume_grader.utils.logging import get_logger
from resume_grader.utils.parsing import parse_json_payload
from resume_grader.utils.protocols import ChatClientProtocol

logger = get_logger(__name__)

GROUP_SYSTEM_MESSAGE = (
    "You are a strict resume evaluator trained in ATS-based rules. "
    "Respond with valid JSON only. No extra text.")


def build_messages(system_message: str, prompt: str) -> list[dict[str, str]]:
	"""Return the two-message chat payload."""
	return [
	    {
	        "role": "system",
	        "content": system_message
	    },
	    {
	        "role": "user",
	        "content": prompt
	    },
	]


def response_content(response: Any) -> str | None:
	"""Return the first choice's message content, if any."""
	choices = getattr(response, "choices", None) or []
	if not choices:
		return None
	message = getattr(choices[0], "message", None)
	return getattr(message, "content", None)


def _validation_summary(exc: ValidationError) -> str:
	"""Condense a pydantic error into one line of field: message pairs."""
	return "; ".join(
	    f"{'.'.join(str(p) for p in err['loc']) or 'item'}: {err['msg']}"
	    for err in exc.errors())


def parse_group_response(content: str | None,
                         group: RubricGroup) -> list[RuleVerdict]:
	"""
	Turn raw message content into validated verdicts.

	Every verdict must name a distinct rule of the group. Verdicts take the
	definition's name, category and weight and are returned in definition
	order. Missing rules are not detected here; the merge checks coverage.

	Parameters:
		content: Raw message content from the reasoning service.
		group: The rubric group that was graded.

	Returns:
		Validated verdicts.

	Raises:
		MalformedResponseError: On empty content, invalid JSON, a non-array
			payload, an element failing schema validation, or a rule that is
			not in the group or appears twice.
	"""
	if not content or not content.strip():
		raise MalformedResponseError("Empty response from reasoning service")
	try:
		payload = parse_json_payload(content)
	except ValueError as exc:
		raise MalformedResponseError(
		    f"Response is not valid JSON ({exc}): {excerpt(content)}"
		) from exc
	if not isinstance(payload, list):
		raise MalformedResponseError(
		    f"Expected an array of rule objects, got "
		    f"{type(payload).__name__}")

	positions = {d.rule: i for i, d in enumerate(group.rules)}
	keyed: list[tuple[int, RuleVerdict]] = []
	seen: set[str] = set()
	for idx, item in enumerate(payload):
		if not isinstance(item, dict):
			raise MalformedResponseError(
			    f"Element {idx} is {type(item).__name__}, expected object")
		name = item.get("rule")
		definition = group.find(name) if isinstance(name, str) else None
		if definition is None:
			raise MalformedResponseError(
			    f"Element {idx} names unknown rule {name!r} for group "
			    f"'{group.name}'")
		if definition.rule in seen:
			raise MalformedResponseError(
			    f"Element {idx} repeats rule '{definition.rule}'")
		seen.add(definition.rule)
		try:
			verdict = RuleVerdict.from_payload(item, definition)
		except ValidationError as exc:
			raise MalformedResponseError(
			    f"Element {idx} ({name!r}) failed validation: "
			    f"{_validation_summary(exc)}") from exc
		keyed.append((positions[definition.rule], verdict))
	keyed.sort(key=lambda pair: pair[0])
	return [verdict for _, verdict in keyed]


async def evaluate_group(
    client: ChatClientProtocol,
    config: Config,
    group: RubricGroup,
    resume_text: str,
    progress_cb: Optional[ProgressCallback] = None,
) -> GroupResult:
	"""
	Grade one rubric group with bounded retries.

	Each attempt sends exactly one request and is bounded by
	``config.attempt_timeout_seconds``. Transport errors, timeouts and
	malformed responses all count as failed attempts. Token usage is
	summed over every attempt that received a response.

	Parameters:
		client: Reasoning-service client.
		config: Application configuration.
		group: Rubric slice to grade.
		resume_text: Resume text.
		progress_cb: Optional progress callback.

	Returns:
		GroupResult with the validated verdicts.

	Raises:
		GroupExhaustedError: When all ``config.max_retries + 1`` attempts
			fail.
	"""
	messages = build_messages(GROUP_SYSTEM_MESSAGE,
	                          build_group_prompt(group, resume_text))
	total = config.total_attempts
	usage = TokenUsage()
	last_exc: Exception | None = None
	reason = ""
	logger.info("group %s start rules=%d", group.name, group.size)
	notify(progress_cb, group.name, "group_started")

	for attempt in range(1, total + 1):
		try:
			response = await asyncio.wait_for(
			    client.chat.completions.create(
			        model=config.model,
			        messages=messages,
			        temperature=config.group_temperature,
			    ),
			    timeout=config.attempt_timeout_seconds,
			)
			usage.merge(TokenUsage.from_response(response))
			verdicts = parse_group_response(response_content(response), group)
		except asyncio.TimeoutError as exc:
			last_exc = exc
			reason = f"timed out after {config.attempt_timeout_seconds:g}s"
		except Exception as exc:
			last_exc = exc
			reason = str(exc) or type(exc).__name__
		else:
			logger.info("group %s completed attempts=%d verdicts=%d tokens=%d",
			            group.name, attempt, len(verdicts), usage.total_tokens)
			notify(progress_cb, group.name, "group_completed")
			return GroupResult(
			    group=group.name,
			    verdicts=verdicts,
			    usage=usage,
			    attempts=attempt,
			)

		logger.warning("group %s attempt %d/%d failed: %s", group.name,
		               attempt, total, reason)
		notify(progress_cb, group.name,
		       f"attempt_failed {attempt}/{total}: {reason}")
		if attempt < total and config.retry_delay_seconds > 0:
			await asyncio.sleep(config.retry_delay_seconds)

	logger.error("group %s exhausted %d attempts", group.name, total)
	notify(progress_cb, group.name, "group_failed")
	raise GroupExhaustedError(group.name, total, reason) from last_exc


__all__ = [
    "GROUP_SYSTEM_MESSAGE",
    "build_messages",
    "response_content",
    "parse_group_response",
    "evaluate_group",
]
