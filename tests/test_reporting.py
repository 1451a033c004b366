import json

from resume_grader.ui.reporting import (
    render_result_md,
    save_report_md,
    save_result_json,
)

from helpers import make_result


def test_render_result_md(groups):
	result = make_result(groups, penalty=2, overview="Needs more metrics.")
	md = render_result_md(result)
	assert md.startswith("# Resume Evaluation Report")
	assert "| Final Score   | 80.0 / 100" in md
	assert "| Grade         | Strong" in md
	assert "> **Overview:** Needs more metrics." in md
	assert "1. Improve Quantified achievements" in md
	assert "### Experience (26/130)" in md
	assert "| Quantified achievements | 5 | 2 | 10 | Section not found |" in md


def test_render_escapes_pipes(groups):
	result = make_result(groups)
	rules = list(result.rules)
	rules[0] = rules[0].model_copy(update={"suggestion": "a | b"})
	md = render_result_md(result.model_copy(update={"rules": rules}))
	assert "a \\| b" in md


def test_save_report_md_creates_dirs(tmp_path):
	out = tmp_path / "nested" / "report.md"
	save_report_md(out, "# hi")
	assert out.read_text(encoding="utf-8") == "# hi"


def test_save_result_json(tmp_path, groups):
	out = tmp_path / "out" / "result.json"
	save_result_json(out, make_result(groups))
	data = json.loads(out.read_text(encoding="utf-8"))
	assert len(data["rules"]) == 28
	assert data["summary"]["grade"] == "Excellent"
	assert data["usage"]["total_tokens"] == 150
