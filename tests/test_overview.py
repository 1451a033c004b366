import asyncio

import pytest

from resume_grader.core.overview import (
    build_overview_prompt,
    extract_overview,
    synthesize_overview,
)
from resume_grader.models.config import Config
from resume_grader.models.evaluation import FALLBACK_OVERVIEW
from resume_grader.models.verdict import RuleVerdict

from helpers import DummyClient, make_response


def _verdicts():
	return [
	    RuleVerdict(rule="Contact information",
	                category="Structure",
	                weight=3,
	                penalty=4,
	                suggestion="Add a phone number"),
	]


@pytest.mark.asyncio
async def test_overview_success(config):
	client = DummyClient(
	    lambda kw: '"Solid resume held back by missing metrics."')
	messages = []
	overview, usage = await synthesize_overview(
	    client, config, _verdicts(), lambda s, m: messages.append((s, m)))
	assert overview == "Solid resume held back by missing metrics."
	assert usage.total_tokens == 15
	call = client.calls[0]
	assert call["temperature"] == 0.3
	assert "1 rule objects" in call["messages"][0]["content"]
	assert messages == [("overview", "overview_started"),
	                    ("overview", "overview_completed")]


@pytest.mark.asyncio
async def test_overview_falls_back_on_error(config):
	client = DummyClient(lambda kw: RuntimeError("503 Service Unavailable"))
	messages = []
	overview, usage = await synthesize_overview(
	    client, config, _verdicts(), lambda s, m: messages.append(m))
	assert overview == FALLBACK_OVERVIEW
	assert usage.total_tokens == 0
	assert messages[-1] == "overview_fallback"
	assert len(client.calls) == 1


@pytest.mark.asyncio
async def test_overview_falls_back_on_empty_content(config):
	client = DummyClient(lambda kw: make_response("   ", 40, 0))
	overview, usage = await synthesize_overview(client, config, _verdicts())
	assert overview == FALLBACK_OVERVIEW
	assert usage.prompt_tokens == 40


@pytest.mark.asyncio
async def test_overview_falls_back_on_timeout():
	cfg = Config(OPENAI_API_KEY="sk-test-0000000000",
	             OVERVIEW_TIMEOUT_SECONDS=0.05)

	async def handler(kw):
		await asyncio.sleep(1)
		return "too late"

	overview, _ = await synthesize_overview(DummyClient(handler), cfg,
	                                        _verdicts())
	assert overview == FALLBACK_OVERVIEW


def test_overview_prompt_contains_verdicts():
	prompt = build_overview_prompt(_verdicts())
	assert prompt.startswith("Here are the rule evaluations:\n")
	assert '"rule": "Contact information"' in prompt
	assert prompt.endswith(
	    "Return only the 1-sentence summary. No formatting.")


@pytest.mark.parametrize(
    "content,expected",
    [
        ("Strong resume.", "Strong resume."),
        ("  'Strong resume.'  ", "Strong resume."),
        ("```\nStrong resume.\n```", "Strong resume."),
        ('```json\n{"overview": "Strong resume."}\n```', "Strong resume."),
        ('"Strong\n   resume."', "Strong resume."),
        ("", None),
        ("``````", None),
        ("[1, 2]", None),
    ],
)
def test_extract_overview(content, expected):
	assert extract_overview(content) == expected
