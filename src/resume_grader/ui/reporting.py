"""
Result rendering and persistence utilities.

Provides functions for rendering an EvaluationResult to markdown and
saving results to disk as markdown or JSON.
"""

from __future__ import annotations

from pathlib import Path
from string import Template

from resume_grader.models.evaluation import EvaluationResult
from resume_grader.models.summary import build_score_card

REPORT_TEMPLATE = Template("""# Resume Evaluation Report

## Summary

| Item          | Value                              |
| ------------- | ---------------------------------- |
| Final Score   | ${final_score} / 100               |
| Grade         | ${grade}                           |
| Penalty       | ${total_penalty} / ${max_penalty}  |

> **Overview:** ${overview}

## Top Fixes

${top_fixes}

## Rule Breakdown
${categories}
""")


def _cell(value: str | None) -> str:
	"""Escape a value for a markdown table cell."""
	return (value or "").replace("|", "\\|").replace("\n", " ")


def render_result_md(result: EvaluationResult) -> str:
	"""
	Render a markdown report from an EvaluationResult.

	Parameters:
		result: The evaluation to render.

	Returns:
		Rendered markdown string.
	"""
	data = build_score_card(result)
	fixes = "\n".join(f"{i}. {fix}"
	                  for i, fix in enumerate(data.top_fixes, start=1))
	sections = []
	for category in data.categories:
		lines = [
		    f"\n### {category.category} "
		    f"({category.weighted_penalty}/{category.max_penalty})\n",
		    "| Rule | Weight | Penalty | Weighted | Trigger | Suggestion |",
		    "| ---- | -----: | ------: | -------: | ------- | ---------- |",
		]
		for v in category.rules:
			lines.append(f"| {_cell(v.rule)} | {v.weight} | {v.penalty} | "
			             f"{v.weighted_penalty} | {_cell(v.trigger)} | "
			             f"{_cell(v.suggestion)} |")
		sections.append("\n".join(lines))
	return REPORT_TEMPLATE.safe_substitute(
	    final_score=f"{data.final_score:.1f}",
	    grade=data.grade,
	    total_penalty=data.total_weighted_penalty,
	    max_penalty=data.max_possible_penalty,
	    overview=data.overview,
	    top_fixes=fixes or "_None._",
	    categories="\n".join(sections),
	)


def save_report_md(path: Path | str, content: str) -> None:
	"""
	Persist markdown content to disk, ensuring parent directories.

	Parameters:
		path: Destination file path.
		content: Markdown content to write.
	"""
	Path(path).parent.mkdir(parents=True, exist_ok=True)
	Path(path).write_text(content, encoding="utf-8")


def save_result_json(path: Path | str, result: EvaluationResult) -> None:
	"""Write the result as indented JSON, ensuring parent directories."""
	Path(path).parent.mkdir(parents=True, exist_ok=True)
	Path(path).write_text(result.model_dump_json(indent=2), encoding="utf-8")


__all__ = ["render_result_md", "save_report_md", "save_result_json"]
