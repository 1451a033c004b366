"""
Rubric loading utilities.

Loads the static rule table from YAML and checks it against the scoring
contract. A malformed rubric is a fatal configuration error raised at
startup, before any resume is evaluated.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from resume_grader.errors import RubricConfigError
from resume_grader.models.rubric import (
    MAX_POSSIBLE_PENALTY,
    MAX_RULE_PENALTY,
    RUBRIC_SIZE,
    RuleDefinition,
)

DEFAULT_RUBRIC_PATH = (Path(__file__).resolve().parents[1] / "assets" /
                       "rubric.yaml")


def validate_rubric(rules: tuple[RuleDefinition, ...],
                    source: str = "rubric") -> None:
	"""
	Check rule count, name uniqueness and the maximum theoretical penalty.

	Raises:
		RubricConfigError: If any check fails.
	"""
	if len(rules) != RUBRIC_SIZE:
		raise RubricConfigError(
		    f"{source}: expected {RUBRIC_SIZE} rules, found {len(rules)}")
	seen: set[str] = set()
	for definition in rules:
		key = definition.rule.casefold()
		if key in seen:
			raise RubricConfigError(
			    f"{source}: duplicate rule '{definition.rule}'")
		seen.add(key)
	max_penalty = sum(d.weight * MAX_RULE_PENALTY for d in rules)
	if max_penalty != MAX_POSSIBLE_PENALTY:
		raise RubricConfigError(
		    f"{source}: maximum penalty is {max_penalty}, "
		    f"expected {MAX_POSSIBLE_PENALTY}")


def parse_rubric(data: Any,
                 source: str = "rubric") -> tuple[RuleDefinition, ...]:
	"""
	Build rule definitions from decoded YAML.

	Accepts either a mapping with a ``rules`` list or a bare list.

	Parameters:
		data: Decoded YAML document.
		source: Label used in error messages.

	Returns:
		Validated rule definitions in file order.
	"""
	items = data.get("rules") if isinstance(data, dict) else data
	if not isinstance(items, list):
		raise RubricConfigError(f"{source}: expected a list of rules")
	try:
		rules = tuple(RuleDefinition.model_validate(item) for item in items)
	except ValidationError as exc:
		raise RubricConfigError(f"{source}: invalid rule: {exc}") from exc
	validate_rubric(rules, source)
	return rules


def load_rubric(path: str | Path | None = None) -> tuple[RuleDefinition, ...]:
	"""
	Load and validate a rubric YAML file.

	Parameters:
		path: Rubric file; defaults to the bundled rubric.

	Returns:
		Validated rule definitions in canonical order.

	Raises:
		RubricConfigError: If the file is missing, unreadable or invalid.
	"""
	rubric_path = Path(path) if path else DEFAULT_RUBRIC_PATH
	if not rubric_path.is_file():
		raise RubricConfigError(f"Rubric file not found at {rubric_path}")
	try:
		data = yaml.safe_load(rubric_path.read_text(encoding="utf-8"))
	except yaml.YAMLError as exc:
		raise RubricConfigError(
		    f"{rubric_path}: invalid YAML: {exc}") from exc
	return parse_rubric(data, str(rubric_path))


@lru_cache(maxsize=None)
def default_rubric() -> tuple[RuleDefinition, ...]:
	"""Return the bundled rubric, loaded once per process."""
	return load_rubric()


__all__ = [
    "DEFAULT_RUBRIC_PATH",
    "validate_rubric",
    "parse_rubric",
    "load_rubric",
    "default_rubric",
]
