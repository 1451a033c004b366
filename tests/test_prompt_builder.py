from resume_grader.core.prompt_builder import build_group_prompt
from resume_grader.loaders.prompts import load_prompt


def test_group_prompt_scopes_rules(groups):
	group = groups[2]
	prompt = build_group_prompt(group, "RESUME TEXT")
	assert prompt.startswith(load_prompt("evaluation_task.md"))
	assert "Analyze ONLY the following rules:" in prompt
	for rule in group.rules:
		assert f'"rule": "{rule.rule}"' in prompt
	assert '"rule": "Contact information"' not in prompt
	assert "- Do not include a summary." in prompt
	assert "JSON array of 3 rule objects" in prompt
	assert prompt.endswith("Resume:\nRESUME TEXT")


def test_group_prompt_custom_base(groups):
	prompt = build_group_prompt(groups[0], "cv", base_prompt="BASE")
	assert prompt.startswith("BASE\n\n")
	assert "JSON array of 7 rule objects" in prompt


def test_evaluation_task_prompt_has_penalty_scale():
	text = load_prompt("evaluation_task.md")
	assert "Penalty Scale" in text
	assert "Section not found" in text
