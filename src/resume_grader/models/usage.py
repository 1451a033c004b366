"""
Token usage model.

Reads the usage block of a chat completion response and sums it across
attempts and calls for reporting and cost estimates.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field, field_validator

_USAGE_FIELDS = ("prompt_tokens", "completion_tokens", "total_tokens")


class TokenUsage(BaseModel):
	"""Token counts reported by the reasoning service.

	Absent or null counts are treated as zero.
	"""

	prompt_tokens: int = Field(0, description="Tokens sent in the prompt")
	completion_tokens: int = Field(0,
	                               description="Tokens in the completion")
	total_tokens: int = Field(0, description="Prompt plus completion tokens")

	@field_validator(*_USAGE_FIELDS, mode="before")
	@classmethod
	def none_to_zero(cls, v: Any) -> Any:
		return 0 if v is None else v

	@classmethod
	def from_response(cls, response: Any) -> "TokenUsage":
		"""Read the usage record from a chat completion response."""
		usage = getattr(response, "usage", None)
		if usage is None:
			return cls()
		if isinstance(usage, dict):
			return cls(**{k: usage.get(k) for k in _USAGE_FIELDS})
		return cls(**{k: getattr(usage, k, None) for k in _USAGE_FIELDS})

	def merge(self, other: "TokenUsage") -> None:
		"""Accumulate another usage record field-wise."""
		self.prompt_tokens += other.prompt_tokens
		self.completion_tokens += other.completion_tokens
		self.total_tokens += other.total_tokens

	def cost(self, prompt_price_per_1k: float,
	         completion_price_per_1k: float) -> float:
		"""Estimate spend in USD from per-1K token prices."""
		return round(
		    self.prompt_tokens / 1000 * prompt_price_per_1k +
		    self.completion_tokens / 1000 * completion_price_per_1k, 6)


def aggregate(usages: Iterable[TokenUsage]) -> TokenUsage:
	"""Sum multiple usage records into one new record."""
	agg = TokenUsage()
	for u in usages:
		agg.merge(u)
	return agg


__all__ = ["TokenUsage", "aggregate"]
