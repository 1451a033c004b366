"""
Response text parsing utilities.

Provides functions for removing markdown code fences from model output
and decoding the remaining JSON payload.
"""

from __future__ import annotations

import json
import re
from typing import Any

ANY_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.S | re.I)
OPEN_FENCE_RE = re.compile(r"^```(?:json)?\s*", re.I)
CLOSE_FENCE_RE = re.compile(r"\s*```$")
WRAPPING_QUOTES_RE = re.compile(r"^[\"']|[\"']$")


def strip_code_fences(text: str) -> str:
	"""
	Return the content of the first fenced block, else the trimmed text.

	A dangling opening or closing fence (model output cut short) is
	removed as well.

	Parameters:
		text: Input text potentially wrapped in a fenced code block.

	Returns:
		Text without surrounding fence markup.
	"""
	stripped = text.strip()
	m = ANY_FENCE_RE.search(stripped)
	if m:
		return m.group(1).strip()
	stripped = OPEN_FENCE_RE.sub("", stripped)
	return CLOSE_FENCE_RE.sub("", stripped).strip()


def parse_json_payload(text: str) -> Any:
	"""
	Decode JSON from model output after removing code fences.

	Parameters:
		text: Raw message content.

	Returns:
		The decoded JSON value.

	Raises:
		ValueError: If the content is not valid JSON.
	"""
	return json.loads(strip_code_fences(text))


def strip_wrapping_quotes(text: str) -> str:
	"""Remove one leading and one trailing quote character, if present."""
	return WRAPPING_QUOTES_RE.sub("", text.strip()).strip()


__all__ = [
    "strip_code_fences",
    "parse_json_payload",
    "strip_wrapping_quotes",
]
