"""
Error taxonomy for resume evaluation.

Every failure the engine surfaces to a caller is a ``ResumeGraderError``
carrying a ``category`` so callers can tell input problems apart from
upstream or integration problems. Messages are passed through the
credential sanitizer before they are stored.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from resume_grader.utils.logging import sanitize_text

# Maximum characters of an upstream payload quoted inside an error message.
MAX_EXCERPT_CHARS = 200


class ErrorCategory(str, Enum):
	"""Coarse classification of engine failures."""

	INPUT = "input"
	UPSTREAM = "upstream"
	INTEGRITY = "integrity"
	CONFIGURATION = "configuration"
	EXTRACTION = "extraction"


def excerpt(text: str | None, limit: int = MAX_EXCERPT_CHARS) -> str:
	"""Return a short, single-line excerpt of an upstream payload."""
	if not text:
		return ""
	flat = " ".join(text.split())
	if len(flat) <= limit:
		return flat
	return flat[:limit] + "..."


class ResumeGraderError(Exception):
	"""Base class for all structured engine failures."""

	category: ErrorCategory = ErrorCategory.UPSTREAM

	def __init__(self, message: str) -> None:
		self.message = sanitize_text(message)
		super().__init__(self.message)

	def to_dict(self) -> dict[str, Any]:
		"""Return the structured failure payload exposed to callers."""
		return {
		    "error": {
		        "category": self.category.value,
		        "message": self.message,
		    }
		}


class InputValidationError(ResumeGraderError):
	"""Resume text is missing, not a string, or blank."""

	category = ErrorCategory.INPUT


class MalformedResponseError(ResumeGraderError):
	"""A reasoning-service response could not be turned into verdicts.

	Raised inside the group retry loop and consumed there; it only reaches
	callers wrapped in a ``GroupExhaustedError``.
	"""

	category = ErrorCategory.UPSTREAM


class GroupExhaustedError(ResumeGraderError):
	"""A rubric group failed on every allowed attempt."""

	category = ErrorCategory.UPSTREAM

	def __init__(self, group: str, attempts: int,
	             last_error: str | None = None) -> None:
		self.group = group
		self.attempts = attempts
		detail = f": {last_error}" if last_error else ""
		super().__init__(f"Max retries reached for rule group '{group}' "
		                 f"after {attempts} attempts{detail}")


class MergeIntegrityError(ResumeGraderError):
	"""Merged verdicts do not cover the rubric exactly once, in order."""

	category = ErrorCategory.INTEGRITY

	def __init__(self, expected: int, actual: int,
	             detail: str | None = None) -> None:
		self.expected = expected
		self.actual = actual
		suffix = f": {detail}" if detail else ""
		super().__init__(f"Expected {expected} rule verdicts after merge, "
		                 f"got {actual}{suffix}")


class ConfigurationError(ResumeGraderError):
	"""Runtime configuration is missing or invalid."""

	category = ErrorCategory.CONFIGURATION


class RubricConfigError(ConfigurationError):
	"""The static rubric table is malformed."""


class UnsupportedFormatError(ResumeGraderError):
	"""No text extractor handles the declared document format."""

	category = ErrorCategory.EXTRACTION


class ExtractionError(ResumeGraderError):
	"""A document could not be decoded to plain text."""

	category = ErrorCategory.EXTRACTION


__all__ = [
    "ErrorCategory",
    "ResumeGraderError",
    "InputValidationError",
    "MalformedResponseError",
    "GroupExhaustedError",
    "MergeIntegrityError",
    "ConfigurationError",
    "RubricConfigError",
    "UnsupportedFormatError",
    "ExtractionError",
    "excerpt",
    "MAX_EXCERPT_CHARS",
]
