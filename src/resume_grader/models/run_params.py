"""
Run parameters model.

Defines validated run parameters for CLI invocation: the resume to score
plus optional overrides applied on top of the environment configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_core.core_schema import ValidationInfo


class RunParams(BaseModel):
	"""Validated run parameters for CLI/runner."""

	resume_path: Path = Field(description="Resume file to evaluate")
	model: Optional[str] = Field(default=None, description="Override model")
	max_retries: Optional[int] = Field(default=None,
	                                   description="Override retry budget")
	timeout: Optional[float] = Field(
	    default=None, description="Override per-attempt timeout seconds")
	show_usage: Optional[bool] = Field(default=None,
	                                   description="Show usage metrics")
	output: Optional[Path] = Field(
	    default=None, description="Write the result as JSON or markdown")

	@field_validator('resume_path')
	@classmethod
	def validate_resume_path(cls, v: Path) -> Path:
		if not v.is_file():
			raise ValueError(f"resume file not found: {v}")
		return v

	@field_validator('model')
	@classmethod
	def validate_model(cls, v: Optional[str]) -> Optional[str]:
		if v is not None and not v.strip():
			raise ValueError("model must not be blank")
		return v

	@field_validator('max_retries')
	@classmethod
	def validate_non_negative(cls, v: Optional[int],
	                          info: ValidationInfo) -> Optional[int]:
		if v is not None and v < 0:
			raise ValueError(f"{info.field_name} must be >= 0")
		return v

	@field_validator('timeout')
	@classmethod
	def validate_positive(cls, v: Optional[float],
	                      info: ValidationInfo) -> Optional[float]:
		if v is not None and v <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@property
	def output_format(self) -> str | None:
		"""Return "json" or "markdown" based on the output suffix."""
		if self.output is None:
			return None
		return "json" if self.output.suffix.lower() == ".json" else "markdown"


__all__ = ["RunParams"]
