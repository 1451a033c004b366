"""Shared test doubles for the reasoning-service client."""

from __future__ import annotations

import inspect
from types import SimpleNamespace

from resume_grader.core.overview import OVERVIEW_SYSTEM_MESSAGE


def make_response(content, prompt_tokens=10, completion_tokens=5):
	"""Build a chat completion shaped like the openai SDK response."""
	return SimpleNamespace(
	    choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
	    usage=SimpleNamespace(
	        prompt_tokens=prompt_tokens,
	        completion_tokens=completion_tokens,
	        total_tokens=prompt_tokens + completion_tokens,
	    ),
	)


def verdicts_for(group, penalty=0, **overrides):
	"""Return a well-formed verdict payload for every rule in a group."""
	return [{
	    "rule": r.rule,
	    "category": r.category,
	    "weight": r.weight,
	    "penalty": penalty,
	    "note": f"note for {r.rule}",
	    "suggestion": f"Improve {r.rule}",
	    "trigger": None,
	    "keywords": None,
	    **overrides,
	} for r in group.rules]


def user_prompt(kwargs):
	return kwargs["messages"][-1]["content"]


def is_overview_call(kwargs):
	head = OVERVIEW_SYSTEM_MESSAGE.split("{", 1)[0]
	return kwargs["messages"][0]["content"].startswith(head)


def group_for(kwargs, groups):
	"""Return the rubric group a group prompt was built for."""
	prompt = user_prompt(kwargs)
	for group in groups:
		if f'"rule": "{group.rules[0].rule}"' in prompt:
			return group
	raise AssertionError("prompt does not match any rubric group")


class DummyCompletions:
	"""Records calls and answers them through a handler.

	The handler receives the request kwargs and returns message content,
	a full response object or an exception to raise. It may be async.
	"""

	def __init__(self, handler):
		self.handler = handler
		self.calls = []

	async def create(self, **kwargs):
		self.calls.append(kwargs)
		result = self.handler(kwargs)
		if inspect.isawaitable(result):
			result = await result
		if isinstance(result, BaseException):
			raise result
		if result is None or isinstance(result, str):
			return make_response(result)
		return result


class DummyClient:

	def __init__(self, handler):
		self.completions = DummyCompletions(handler)
		self.chat = SimpleNamespace(completions=self.completions)
		self.closed = False

	@property
	def calls(self):
		return self.completions.calls

	async def close(self):
		self.closed = True


def make_result(groups, penalty=0, overview="Good resume."):
	"""Build a complete EvaluationResult without any client calls."""
	from resume_grader.core.scoring import apply_weights, build_summary
	from resume_grader.models.evaluation import EvaluationResult
	from resume_grader.models.usage import TokenUsage
	from resume_grader.models.verdict import RuleVerdict

	verdicts = apply_weights([
	    RuleVerdict(**v) for g in groups for v in verdicts_for(g, penalty)
	])
	return EvaluationResult(
	    rules=verdicts,
	    summary=build_summary(verdicts, overview),
	    usage=TokenUsage(prompt_tokens=100, completion_tokens=50,
	                     total_tokens=150),
	    cost_usd=0.0025,
	)
