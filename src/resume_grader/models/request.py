"""
Evaluation request model.

Validates the caller-facing ``{"resumeText": ...}`` payload before any
reasoning-service call is made.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from resume_grader.errors import InputValidationError


class EvaluationRequest(BaseModel):
	"""A single resume evaluation request."""

	model_config = ConfigDict(populate_by_name=True)

	resume_text: str = Field(alias="resumeText", strict=True,
	                         description="Plain resume text, UTF-8")

	@field_validator("resume_text")
	@classmethod
	def validate_not_blank(cls, v: str) -> str:
		if not v.strip():
			raise ValueError("resumeText must not be blank")
		return v

	@classmethod
	def parse(cls, payload: Any) -> "EvaluationRequest":
		"""
		Validate a raw request payload.

		Parameters:
			payload: Mapping with a ``resumeText`` key.

		Returns:
			The validated request.

		Raises:
			InputValidationError: If the payload is not a mapping or
				``resumeText`` is missing, not a string, or blank.
		"""
		if not isinstance(payload, dict):
			raise InputValidationError("Invalid or missing resumeText.")
		try:
			return cls.model_validate(payload)
		except ValidationError as exc:
			reasons = "; ".join(err["msg"] for err in exc.errors())
			raise InputValidationError(
			    f"Invalid or missing resumeText: {reasons}") from exc


__all__ = ["EvaluationRequest"]
