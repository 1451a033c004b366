"""
Rule verdict model.

Defines the validated shape of one rule's graded outcome as returned by
the reasoning service.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .rubric import MAX_RULE_PENALTY, RuleDefinition

# Trigger value used when the model found no matching phrase.
TRIGGER_NOT_FOUND = "Section not found"


class RuleVerdict(BaseModel):
	"""
	Graded outcome for a single rubric rule.

	``weighted_penalty`` is always recomputed as ``penalty * weight``;
	whatever value the reasoning service sent is discarded.
	"""

	model_config = ConfigDict(extra="ignore")

	rule: str = Field(min_length=1)
	category: str = ""
	weight: int = Field(gt=0, strict=True)
	penalty: int = Field(ge=0, le=MAX_RULE_PENALTY, strict=True)
	weighted_penalty: int = 0
	note: str = ""
	suggestion: str = ""
	trigger: str = TRIGGER_NOT_FOUND
	keywords: str | None = None

	@model_validator(mode="before")
	@classmethod
	def drop_upstream_weighted_penalty(cls, data: Any) -> Any:
		if isinstance(data, dict) and "weighted_penalty" in data:
			data = {k: v for k, v in data.items() if k != "weighted_penalty"}
		return data

	@field_validator("note", "suggestion", "category", mode="before")
	@classmethod
	def none_to_empty(cls, v: Any) -> Any:
		return "" if v is None else v

	@field_validator("trigger", mode="before")
	@classmethod
	def normalize_trigger(cls, v: Any) -> Any:
		"""Map null or blank triggers to the not-found sentinel."""
		if v is None or (isinstance(v, str) and not v.strip()):
			return TRIGGER_NOT_FOUND
		return v

	@field_validator("keywords", mode="before")
	@classmethod
	def join_keywords(cls, v: Any) -> Any:
		"""Accept a keyword list and store it comma-separated."""
		if isinstance(v, (list, tuple)):
			v = ", ".join(str(k).strip() for k in v if str(k).strip())
		if isinstance(v, str) and not v.strip():
			return None
		return v

	@model_validator(mode="after")
	def recompute_weighted_penalty(self) -> "RuleVerdict":
		self.weighted_penalty = self.penalty * self.weight
		return self

	@classmethod
	def from_payload(cls, item: dict[str, Any],
	                 definition: RuleDefinition | None) -> "RuleVerdict":
		"""
		Validate one upstream verdict object.

		When the rule matches a rubric definition, the definition's
		canonical name, category and weight override the echoed values.

		Raises:
			pydantic.ValidationError: If required fields are missing or
				have the wrong type or range.
		"""
		if definition is not None:
			item = {
			    **item,
			    "rule": definition.rule,
			    "category": definition.category,
			    "weight": definition.weight,
			}
		return cls.model_validate(item)


__all__ = ["RuleVerdict", "TRIGGER_NOT_FOUND"]
