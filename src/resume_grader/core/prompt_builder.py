"""
Group prompt construction.

Renders one rubric group plus the resume text into the single user
instruction sent to the reasoning service.
"""

from __future__ import annotations

import json

from resume_grader.loaders.prompts import load_prompt
from resume_grader.models.rubric import RubricGroup

VERDICT_SCHEMA = """[
  {
    "rule": "string",
    "category": "string",
    "weight": integer,
    "penalty": integer,
    "weighted_penalty": integer,
    "note": "string",
    "suggestion": "string",
    "trigger": "string|null",
    "keywords": "string|null"
  }
]"""


def _format_rules(group: RubricGroup) -> str:
	"""Serialize the group's rule definitions as pretty JSON."""
	return json.dumps([r.model_dump() for r in group.rules],
	                  indent=2,
	                  ensure_ascii=False)


def build_group_prompt(
    group: RubricGroup,
    resume_text: str,
    base_prompt: str | None = None,
) -> str:
	"""
	Compose the grading prompt for one rubric group.

	The prompt restricts grading to the group's rules and forbids a
	summary; the overview is synthesized separately from all verdicts.

	Parameters:
		group: Rubric slice to grade.
		resume_text: Resume text, included verbatim.
		base_prompt: Global instructions; defaults to evaluation_task.md.

	Returns:
		The full user prompt.
	"""
	base = base_prompt if base_prompt is not None else load_prompt(
	    "evaluation_task.md")
	return (f"{base}\n\n"
	        f"Analyze ONLY the following rules:\n{_format_rules(group)}\n\n"
	        "- Do not include a summary.\n"
	        "- Do not return any extra text, commentary, or markdown.\n"
	        f"- Respond ONLY with a JSON array of {group.size} rule objects, "
	        "one per rule above and in the same order, using this format:\n"
	        f"{VERDICT_SCHEMA}\n\n"
	        f"Resume:\n{resume_text}")


__all__ = ["VERDICT_SCHEMA", "build_group_prompt"]
