from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

if TYPE_CHECKING:
	from .run_params import RunParams


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	api_key: str | None = Field(
	    default=None,
	    alias="OPENAI_API_KEY",
	    description="API key for the reasoning service",
	)
	base_url: str | None = Field(
	    default=None,
	    alias="OPENAI_BASE_URL",
	    description=
	    "OpenAI-compatible endpoint. If unset, the SDK default is used.",
	)
	model: str = Field(
	    "gpt-4o",
	    alias="RESUME_GRADER_MODEL",
	    description="Model used for group and overview calls",
	)
	group_temperature: float = Field(
	    0.0,
	    alias="GROUP_TEMPERATURE",
	    description="Sampling temperature for rubric group calls",
	)
	overview_temperature: float = Field(
	    0.3,
	    alias="OVERVIEW_TEMPERATURE",
	    description="Sampling temperature for the overview call",
	)
	max_retries: int = Field(
	    2,
	    alias="MAX_RETRIES",
	    description="Additional attempts per group after the first failure",
	)
	retry_delay_seconds: float = Field(
	    0.5,
	    alias="RETRY_DELAY_SECONDS",
	    description="Pause between failed group attempts",
	)
	attempt_timeout_seconds: float = Field(
	    90,
	    alias="ATTEMPT_TIMEOUT_SECONDS",
	    description="Timeout for a single group attempt",
	)
	overview_timeout_seconds: float = Field(
	    60,
	    alias="OVERVIEW_TIMEOUT_SECONDS",
	    description="Timeout for the overview call",
	)
	rubric_file: str | None = Field(
	    default=None,
	    alias="RUBRIC_FILE",
	    description="Alternative rubric YAML file (default: bundled rubric)",
	)
	prompt_price_per_1k: float = Field(
	    0.0,
	    alias="PROMPT_PRICE_PER_1K",
	    description="USD per 1K prompt tokens, for cost estimates",
	)
	completion_price_per_1k: float = Field(
	    0.0,
	    alias="COMPLETION_PRICE_PER_1K",
	    description="USD per 1K completion tokens, for cost estimates",
	)
	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level")
	show_usage: bool = Field(
	    False,
	    alias="SHOW_USAGE",
	    description="Show token/cost usage metrics in the summary",
	)

	@field_validator("attempt_timeout_seconds", "overview_timeout_seconds")
	@classmethod
	def validate_positive(cls, v: Any, info: ValidationInfo) -> Any:
		if v <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@field_validator("max_retries", "retry_delay_seconds",
	                 "prompt_price_per_1k", "completion_price_per_1k")
	@classmethod
	def validate_non_negative(cls, v: Any, info: ValidationInfo) -> Any:
		if v < 0:
			raise ValueError(f"{info.field_name} must be >= 0")
		return v

	@field_validator("group_temperature", "overview_temperature")
	@classmethod
	def validate_temperature(cls, v: float, info: ValidationInfo) -> float:
		if not 0 <= v <= 2:
			raise ValueError(f"{info.field_name} must be within [0, 2]")
		return v

	@property
	def total_attempts(self) -> int:
		"""Return the attempt budget for one rubric group."""
		return self.max_retries + 1

	def apply_overrides(self, run_params: "RunParams") -> None:
		"""Apply CLI overrides from RunParams onto this config.

		Only non-None fields in run_params are applied, preserving
		environment-based defaults for anything the user didn't explicitly set.

		Parameters:
			run_params: Validated run parameters with optional overrides.
		"""
		_OVERRIDES: list[tuple[str, str]] = [
		    ("model", "model"),
		    ("max_retries", "max_retries"),
		    ("timeout", "attempt_timeout_seconds"),
		    ("show_usage", "show_usage"),
		]
		for param_field, config_field in _OVERRIDES:
			value = getattr(run_params, param_field)
			if value is not None:
				setattr(self, config_field, value)


__all__ = ["Config", "load_env"]
